# host.py
"""In-process model of the game host the mod plugs into.

The game owns the player's lists, the running event, the console and the
installed content packs. ``Host`` exposes exactly the pieces the mod touches:

- ``player``: the three identifier lists, mutated in place
- ``current_event``: the scripted event in progress (or None)
- ``on`` / ``fire``: lifecycle hooks (``launched``, ``day_started``, ``update_ticked``)
- ``add_command`` / ``run_command``: the console
- ``installed_packs``: content packs with manifest data and directory
- ``add_mail_for_tomorrow``: the game's own mail scheduler

It also (de)serializes a JSON player snapshot so the CLI can work on files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .helpers import split_command_line
from .logging_utils import get_logger

log = get_logger(__name__)

HOOKS = ("launched", "day_started", "update_ticked")

# Handler ordering. Higher runs first.
PRIORITY_HIGH = 1000
PRIORITY_NORMAL = 0
PRIORITY_LOW = -1000

CommandHandler = Callable[[str, List[str]], None]


# ---------------------------------------------------------------------------
# Game State
# ---------------------------------------------------------------------------

@dataclass
class Player:
    events_seen: List[int] = field(default_factory=list)
    mail_received: List[str] = field(default_factory=list)
    responses_answered: List[int] = field(default_factory=list)


@dataclass(eq=False)
class ScriptedEvent:
    """A running event. Identity matters: two events with the same script are different runs."""

    event_id: str
    commands: List[str] = field(default_factory=list)


@dataclass
class PackInfo:
    unique_id: str
    name: str = ""
    content_pack_for: str = ""
    dependencies: List[str] = field(default_factory=list)
    directory: Optional[str] = None

    @property
    def is_content_pack(self) -> bool:
        return bool(self.content_pack_for)


@dataclass
class ConsoleCommand:
    name: str
    usage: str
    handler: CommandHandler


# ---------------------------------------------------------------------------
# Manifest Parsing
# ---------------------------------------------------------------------------

class _ManifestRef(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    unique_id: str = Field(alias="UniqueID")


class Manifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    unique_id: str = Field(alias="UniqueID")
    name: str = Field(default="", alias="Name")
    content_pack_for: Optional[_ManifestRef] = Field(default=None, alias="ContentPackFor")
    dependencies: List[_ManifestRef] = Field(default_factory=list, alias="Dependencies")


def load_packs_from_dir(packs_dir: str) -> List[PackInfo]:
    """Read every ``<packs_dir>/<pack>/manifest.json`` into a PackInfo.

    Folders without a readable manifest are skipped with a warning.
    """
    packs: List[PackInfo] = []
    if not packs_dir or not os.path.isdir(packs_dir):
        return packs
    for entry in sorted(os.listdir(packs_dir)):
        folder = os.path.join(packs_dir, entry)
        manifest_path = os.path.join(folder, "manifest.json")
        if not os.path.isfile(manifest_path):
            continue
        try:
            with open(manifest_path, "r", encoding="utf-8-sig") as f:
                manifest = Manifest.model_validate(json.load(f))
        except (OSError, ValueError, ValidationError) as e:
            log.warning(f"Skipping {folder}: unreadable manifest ({e})")
            continue
        packs.append(
            PackInfo(
                unique_id=manifest.unique_id,
                name=manifest.name,
                content_pack_for=manifest.content_pack_for.unique_id if manifest.content_pack_for else "",
                dependencies=[d.unique_id for d in manifest.dependencies],
                directory=os.path.abspath(folder),
            )
        )
    return packs


# ---------------------------------------------------------------------------
# Host
# ---------------------------------------------------------------------------

class Host:
    def __init__(
        self,
        player: Optional[Player] = None,
        packs: Optional[List[PackInfo]] = None,
        working_dir: Optional[str] = None,
    ):
        self.player = player if player is not None else Player()
        self.packs: List[PackInfo] = list(packs or [])
        self.working_dir = os.path.abspath(working_dir or os.getcwd())
        self.current_event: Optional[ScriptedEvent] = None
        self.mail_for_tomorrow: List[str] = []
        self.commands: Dict[str, ConsoleCommand] = {}
        self._hooks: Dict[str, List[tuple]] = {name: [] for name in HOOKS}
        self._seq = 0

    # -- lifecycle -----------------------------------------------------------

    def on(self, hook: str, handler: Callable[[], None], priority: int = PRIORITY_NORMAL) -> None:
        if hook not in self._hooks:
            raise ValueError(f"unknown hook '{hook}' (expected one of {', '.join(HOOKS)})")
        self._seq += 1
        self._hooks[hook].append((priority, self._seq, handler))

    def fire(self, hook: str) -> None:
        # Descending priority, registration order within a priority.
        for _, _, handler in sorted(self._hooks[hook], key=lambda h: (-h[0], h[1])):
            handler()

    def tick(self, count: int = 1) -> None:
        for _ in range(count):
            self.fire("update_ticked")

    def start_event(self, event: ScriptedEvent) -> None:
        self.current_event = event

    def end_event(self) -> None:
        self.current_event = None

    # -- console -------------------------------------------------------------

    def add_command(self, name: str, usage: str, handler: CommandHandler) -> None:
        key = name.lower()
        if key in self.commands:
            raise ValueError(f"console command '{name}' is already registered")
        self.commands[key] = ConsoleCommand(name=name, usage=usage, handler=handler)

    def run_command(self, line: str) -> bool:
        """Run one console line. Errors raised by the handler propagate.

        Returns False when the command name is unknown.
        """
        name, args = split_command_line(line)
        if not name:
            return False
        cmd = self.commands.get(name.lower())
        if cmd is None:
            log.warning(f"Unknown command '{name}'. Type a registered command name.")
            return False
        cmd.handler(name, args)
        return True

    # -- game services -------------------------------------------------------

    def installed_packs(self) -> List[PackInfo]:
        return list(self.packs)

    def add_mail_for_tomorrow(self, key: str) -> None:
        if key not in self.mail_for_tomorrow:
            self.mail_for_tomorrow.append(key)

    # -- snapshot ------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        return {
            "events_seen": list(self.player.events_seen),
            "mail_received": list(self.player.mail_received),
            "responses_answered": list(self.player.responses_answered),
            "mail_for_tomorrow": list(self.mail_for_tomorrow),
        }

    def restore(self, data: Dict[str, Any]) -> None:
        # Keep the list objects; listeners may hold references to them.
        self.player.events_seen[:] = [int(x) for x in data.get("events_seen", [])]
        self.player.mail_received[:] = [str(x) for x in data.get("mail_received", [])]
        self.player.responses_answered[:] = [int(x) for x in data.get("responses_answered", [])]
        self.mail_for_tomorrow[:] = [str(x) for x in data.get("mail_for_tomorrow", [])]

    def save_state(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.snapshot(), f, indent=2)
            f.write("\n")

    def load_state(self, path: str) -> None:
        with open(path, "r", encoding="utf-8") as f:
            self.restore(json.load(f) or {})
