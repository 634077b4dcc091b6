from typing import Any

import attr


@attr.define(repr=False, str=False)
class UpdateSourceError(ValueError):
    """Raised when a Hash is asked to copy entries from an iterable whose
    elements are not key/value pairs."""

    message: str
    source: Any

    def __repr__(self):
        return f"hashtable.exception.UpdateSourceError({self.message!r}, {self.source!r})"

    def __str__(self):
        return f"{self.message} (got {type(self.source).__name__})"
