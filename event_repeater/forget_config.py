# forget_config.py
"""Collect forget-lists from installed content packs.

A content pack opts in by listing this mod under ``Dependencies`` in its
manifest and adding any of these keys to its content file::

    {
      "RepeatEvents": [1234567],
      "RepeatMail": ["SomeMailKey"],
      "RepeatResponse": [7654321]
    }

Lists from every pack are merged once at launch into an immutable
``ForgetConfig``.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import CONTENT_FILE, CONTENT_PACK_FOR, MOD_ID
from .errors import HostIntegrationError
from .host import PackInfo
from .logging_utils import get_logger

log = get_logger(__name__)


class ThingsToForget(BaseModel):
    """Repeat lists in a pack's content file. Every other key is ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    repeat_events: Optional[List[int]] = Field(default=None, alias="RepeatEvents")
    repeat_mail: Optional[List[str]] = Field(default=None, alias="RepeatMail")
    repeat_response: Optional[List[int]] = Field(default=None, alias="RepeatResponse")


@dataclass(frozen=True)
class ForgetConfig:
    events: FrozenSet[int] = frozenset()
    mail: FrozenSet[str] = frozenset()
    responses: FrozenSet[int] = frozenset()

    @classmethod
    def empty(cls) -> "ForgetConfig":
        return cls()

    def is_empty(self) -> bool:
        return not (self.events or self.mail or self.responses)


def _same_id(a: str, b: str) -> bool:
    return (a or "").strip().lower() == (b or "").strip().lower()


def pack_targets_framework(pack: PackInfo, framework_id: str = CONTENT_PACK_FOR) -> bool:
    if not framework_id:
        return True
    return pack.is_content_pack and _same_id(pack.content_pack_for, framework_id)


def pack_depends_on(pack: PackInfo, mod_id: str = MOD_ID) -> bool:
    return any(_same_id(dep, mod_id) for dep in pack.dependencies)


def read_pack_document(directory: str, filename: str = CONTENT_FILE) -> Optional[ThingsToForget]:
    """Parse the pack's content file; None if it is missing or unusable."""
    path = os.path.join(directory, filename)
    if not os.path.isfile(path):
        return None
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            raw = json.load(f)
        return ThingsToForget.model_validate(raw or {})
    except (OSError, ValueError, ValidationError) as e:
        log.warning(f"Ignoring {path}: {e}")
        return None


def load_forget_config(
    packs: Iterable[PackInfo],
    *,
    mod_id: str = MOD_ID,
    framework_id: str = CONTENT_PACK_FOR,
    filename: str = CONTENT_FILE,
) -> ForgetConfig:
    """Merge the repeat lists of every pack that depends on ``mod_id``.

    Raises HostIntegrationError when a qualifying pack has no directory.
    """
    events: Set[int] = set()
    mail: Set[str] = set()
    responses: Set[int] = set()

    for pack in packs:
        if not pack_targets_framework(pack, framework_id):
            continue
        if not pack_depends_on(pack, mod_id):
            log.debug(f"{pack.unique_id} does not depend on {mod_id}; skipped")
            continue
        if not pack.directory:
            raise HostIntegrationError(
                f"Couldn't fetch the directory path for content pack {pack.name or pack.unique_id}."
            )

        model = read_pack_document(pack.directory, filename)
        if model is None:
            continue

        if model.repeat_events:
            events.update(model.repeat_events)
            log.info(f"Loading {len(model.repeat_events)} forgettable events for {pack.unique_id}")
        if model.repeat_mail:
            mail.update(model.repeat_mail)
            log.info(f"Loading {len(model.repeat_mail)} forgettable mail for {pack.unique_id}")
        if model.repeat_response:
            responses.update(model.repeat_response)
            log.info(f"Loading {len(model.repeat_response)} forgettable responses for {pack.unique_id}")

    log.info(
        f"Loaded a grand total of\n\t{len(events)} events\n\t{len(mail)} mail\n\t{len(responses)} responses"
    )
    return ForgetConfig(events=frozenset(events), mail=frozenset(mail), responses=frozenset(responses))
