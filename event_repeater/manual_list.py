# manual_list.py
"""Operator-curated list of events to repeat, with flat-file save/load.

File format: one decimal event ID per line, nothing else. Files live in
``<working dir>/ManualRepeaterFiles/<name>.txt``.
"""

from __future__ import annotations

import os
from typing import List, Sequence

from .config import MANUAL_DIR_NAME
from .errors import ManualListFormatError
from .helpers import parse_int, remove_value, try_parse_int
from .host import Player
from .logging_utils import get_logger

log = get_logger(__name__)


def write_manual_file(path: str, entries: Sequence[int]) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for evt in entries:
            f.write(f"{int(evt)}\n")


def read_manual_file(path: str) -> List[int]:
    """Parse a saved list. Any non-integer line raises ManualListFormatError."""
    with open(path, "r", encoding="utf-8-sig") as f:
        lines = f.read().splitlines()
    out: List[int] = []
    for line_no, line in enumerate(lines, 1):
        try:
            out.append(parse_int(line))
        except ValueError as e:
            raise ManualListFormatError(path, line_no, line) from e
    return out


class ManualRepeater:
    def __init__(self, working_dir: str, dir_name: str = MANUAL_DIR_NAME):
        self.entries: List[int] = []
        self.directory = os.path.join(working_dir, dir_name)

    def path_for(self, name: str) -> str:
        return os.path.join(self.directory, f"{name}.txt")

    def add_last_seen(self, player: Player) -> None:
        if not player.events_seen:
            log.warning("No seen events to repeat; the seen events list is empty.")
            return
        last_event = player.events_seen.pop()
        self.entries.append(last_event)
        log.debug(f"{last_event} has been added to Manual Repeater")

    def add_ids(self, player: Player, raw_ids: Sequence[str]) -> List[int]:
        added: List[int] = []
        for raw in raw_ids:
            evt = try_parse_int(raw)
            if evt is None:
                log.warning(f"{raw} was not a valid event!")
                continue
            self.entries.append(evt)
            remove_value(player.events_seen, evt)
            added.append(evt)
            log.debug(f"{evt} has been added to Manual Repeater")
        return added

    def add(self, player: Player, args: Sequence[str]) -> None:
        if args:
            self.add_ids(player, args)
        else:
            self.add_last_seen(player)

    def save(self, name: str) -> str:
        os.makedirs(self.directory, exist_ok=True)
        path = self.path_for(name)
        write_manual_file(path, self.entries)
        log.debug(f"Saved file to {path}")
        return path

    def load(self, player: Player, name: str) -> List[int]:
        """Append a saved list and forget its events now.

        No-op when the save directory does not exist. The file is parsed in
        full before anything changes, so a bad line leaves state as it was.
        """
        if not os.path.isdir(self.directory):
            return []
        loaded = read_manual_file(self.path_for(name))
        for evt in loaded:
            self.entries.append(evt)
            remove_value(player.events_seen, evt)
        log.debug(f"{name} loaded!")
        return loaded
