# mod.py
"""Mod entry point: hooks the repeater into a host."""

from __future__ import annotations

from typing import Optional

from .commands.handlers import register_commands
from .extractor import EventWatcher, process_event
from .forget_config import load_forget_config
from .host import PRIORITY_LOW, PRIORITY_NORMAL, Host, ScriptedEvent
from .logging_utils import get_logger
from .manual_list import ManualRepeater
from .reconcile import ReconcileResult, reconcile_day
from .repeater_state import RepeaterState

log = get_logger(__name__)


class EventRepeater:
    def __init__(self, host: Host, state: Optional[RepeaterState] = None):
        self.host = host
        self.state = state or RepeaterState(manual=ManualRepeater(host.working_dir))
        self.state.watcher = EventWatcher(self._on_event_started)
        self.last_result: Optional[ReconcileResult] = None

    def entry(self) -> "EventRepeater":
        """Register hooks and console commands. Call once."""
        self.host.on("launched", self.on_launched)
        # Run after anything else that adds to the player's lists today.
        self.host.on("day_started", self.on_day_started, priority=PRIORITY_LOW)
        self.host.on("update_ticked", self.on_update_ticked, priority=PRIORITY_NORMAL)
        register_commands(self.host, self.state)
        return self

    # -- hooks ---------------------------------------------------------------

    def on_launched(self) -> None:
        if self.state.launched:
            return
        self.state.forget = load_forget_config(self.host.installed_packs())
        self.state.launched = True

    def on_day_started(self) -> None:
        self.state.days_started += 1
        self.last_result = reconcile_day(self.host.player, self.state.forget, self.state.manual.entries)

    def on_update_ticked(self) -> None:
        self.state.watcher.poll(self.host.current_event)

    def _on_event_started(self, event: ScriptedEvent) -> None:
        extracted = process_event(self.host.player, event)
        if extracted:
            log.debug(f"Handled {len(extracted)} forget command(s) in event {event.event_id}")


def entry(host: Host) -> EventRepeater:
    """Create the mod for ``host`` and register it."""
    return EventRepeater(host).entry()
