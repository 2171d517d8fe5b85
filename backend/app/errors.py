"""Error taxonomy for icon strip requests."""

from __future__ import annotations

from collections.abc import Sequence


class IconStripError(Exception):
    """Base application error"""


class InvalidRequestError(IconStripError):
    """Bad or missing options, unsafe icon names, empty or oversized requests"""


class NoContentError(IconStripError):
    """None of the requested icons could be resolved"""

    def __init__(self, names: Sequence[str] = ()) -> None:
        self.names = list(names)
        if self.names:
            message = f"None of the requested icons exist: {', '.join(self.names)}"
        else:
            message = "No icons to compose"
        super().__init__(message)
