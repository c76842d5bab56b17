# reconcile.py
"""Start-of-day pass that makes repeatable content available again."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Collection, List, MutableSequence, Sequence

from .forget_config import ForgetConfig
from .host import Player
from .logging_utils import get_logger

log = get_logger(__name__)


@dataclass
class ReconcileResult:
    events: List[int] = field(default_factory=list)
    mail: List[str] = field(default_factory=list)
    responses: List[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.events) + len(self.mail) + len(self.responses)


def _forget_matching(
    items: MutableSequence[Any],
    should_forget: Callable[[Any], bool],
    on_removed: Callable[[Any], None],
) -> List[Any]:
    # Walk backwards so deleting by index never skips the next entry.
    removed: List[Any] = []
    for i in range(len(items) - 1, -1, -1):
        value = items[i]
        if should_forget(value):
            del items[i]
            on_removed(value)
            removed.append(value)
    return removed


def reconcile_day(
    player: Player,
    forget: ForgetConfig,
    manual: Sequence[int] = (),
) -> ReconcileResult:
    """Remove every forgettable ID from the player's lists.

    Events are checked against the configured set and the manual repeater
    list, mail and responses against their configured sets. The forget sets
    themselves are never modified.
    """
    result = ReconcileResult()
    manual_set: Collection[int] = frozenset(manual)

    def _log_event(evt: int) -> None:
        if evt in forget.events:
            log.info(f"Repeatable Event Found! Resetting for next time! Event ID: {evt}")
        else:
            log.info(f"Manual Repeater Engaged! Resetting: {evt}")

    if forget.events or manual_set:
        result.events = _forget_matching(
            player.events_seen,
            lambda evt: evt in forget.events or evt in manual_set,
            _log_event,
        )
    if not result.events:
        log.info("No repeatable events were removed")

    if forget.mail:
        result.mail = _forget_matching(
            player.mail_received,
            lambda msg: msg in forget.mail,
            lambda msg: log.info(f"Repeatable Mail found!  Resetting: {msg}"),
        )
    if not result.mail:
        log.info("No repeatable mail found for removal.")

    if forget.responses:
        result.responses = _forget_matching(
            player.responses_answered,
            lambda rsp: rsp in forget.responses,
            lambda rsp: log.info(f"Repeatable Response Found! Resetting: {rsp}"),
        )
    if not result.responses:
        log.info("No repeatable responses found.")

    return result
