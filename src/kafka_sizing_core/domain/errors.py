"""
Domain Errors

Exception hierarchy raised by the sizing engine.
"""

from __future__ import annotations


class SizingError(Exception):
    """Base class for all sizing engine errors"""
    pass


class ValidationError(SizingError, ValueError):
    """An input field falls outside its declared domain"""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {value!r} ({reason})")


class NotFoundError(SizingError, KeyError):
    """Lookup of an undefined key (domain, environment, connector, field)"""

    def __init__(self, kind: str, key: object, available: list | None = None) -> None:
        self.kind = kind
        self.key = key
        self.available = available
        message = f"Unknown {kind}: {key!r}"
        if available is not None:
            message += f" (available: {available})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
