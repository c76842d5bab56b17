# extractor.py
"""Handle forget instructions embedded in event scripts.

Content packs can write ``forgetEvent <id>``, ``forgetMail <key>`` or
``forgetResponse <id>`` straight into an event script. The game would not
understand them, so when an event starts they are taken out of the script
and applied to the player right away.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .config import FORGET_COMMANDS
from .helpers import first_token, remove_value, try_parse_int
from .host import Player, ScriptedEvent
from .logging_utils import get_logger

log = get_logger(__name__)


def extract_commands(commands: Sequence[str], names: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split an event script into (remaining, extracted).

    An instruction is extracted when its first token is one of ``names``.
    Both lists keep the original relative order.
    """
    wanted = set(names)
    remaining: List[str] = []
    extracted: List[str] = []
    for command in commands:
        if first_token(command) in wanted:
            extracted.append(command)
        else:
            remaining.append(command)
    return remaining, extracted


def apply_forget_command(player: Player, command: str) -> bool:
    """Apply one extracted instruction. Returns True if it was well-formed."""
    parts = command.split(" ")
    name = parts[0]
    if len(parts) != 2:
        log.warning(f"The {name} command requires one argument (event command: {command}).")
        return False
    raw_id = parts[1]

    if name == "forgetEvent":
        event_id = try_parse_int(raw_id)
        if event_id is None:
            log.warning(f"Could not parse event ID '{raw_id}' for {name} command.")
            return False
        remove_value(player.events_seen, event_id)
    elif name == "forgetMail":
        remove_value(player.mail_received, raw_id)
    elif name == "forgetResponse":
        response_id = try_parse_int(raw_id)
        if response_id is None:
            log.warning(f"Could not parse response ID '{raw_id}' for {name} command.")
            return False
        remove_value(player.responses_answered, response_id)
    else:
        log.warning(f"Unrecognized command name '{name}'.")
        return False
    return True


def process_event(
    player: Player,
    event: ScriptedEvent,
    names: Iterable[str] = FORGET_COMMANDS,
) -> List[str]:
    """Strip forget instructions from ``event`` and apply them; returns the extracted ones."""
    remaining, extracted = extract_commands(event.commands, names)
    event.commands = remaining
    for command in extracted:
        apply_forget_command(player, command)
    return extracted


class EventWatcher:
    """Edge trigger for "a new event just started".

    Poll once per tick with the host's current event. ``on_start`` runs only
    on the tick where the current event becomes a different, non-empty event;
    further polls with the same event do nothing.
    """

    def __init__(self, on_start: Callable[[ScriptedEvent], None]):
        self.on_start = on_start
        self.last_event: Optional[ScriptedEvent] = None

    @property
    def in_event(self) -> bool:
        return self.last_event is not None

    def poll(self, current: Optional[ScriptedEvent]) -> bool:
        started = current is not None and current is not self.last_event
        # Record before firing so a re-check from inside on_start is a no-op.
        self.last_event = current
        if started:
            self.on_start(current)
        return started
