# repeater_state.py
"""Runtime state owned by the mod for one game session."""

from dataclasses import dataclass, field
from typing import Optional

from .extractor import EventWatcher
from .forget_config import ForgetConfig
from .manual_list import ManualRepeater


@dataclass
class RepeaterState:
    manual: ManualRepeater

    # Replaced once at launch, read-only afterwards.
    forget: ForgetConfig = field(default_factory=ForgetConfig.empty)

    watcher: Optional[EventWatcher] = None
    launched: bool = False
    days_started: int = 0
