"""event-repeater: make seen game events, mail and dialogue responses repeatable."""

from .__about__ import __version__

__all__ = ["__version__"]
