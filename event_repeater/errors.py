# errors.py
"""Exception types raised by event-repeater."""


class EventRepeaterError(Exception):
    """Base class for event-repeater failures."""


class HostIntegrationError(EventRepeaterError):
    """The host did not provide something the mod cannot run without."""


class ManualListFormatError(EventRepeaterError, ValueError):
    """A saved manual repeater file contains a line that is not an integer."""

    def __init__(self, path: str, line_no: int, line: str):
        self.path = path
        self.line_no = line_no
        self.line = line
        super().__init__(f"{path}:{line_no}: not an event ID: {line!r}")
