from __future__ import annotations


class Mt2LinkError(Exception):
    """Base class for errors raised by mt2link."""


class CobsDecodeError(Mt2LinkError, ValueError):
    """Raised when a byte-stuffed frame is malformed and cannot be recovered."""


class UnknownTypeError(Mt2LinkError, KeyError):
    """Raised when a register table names a type outside the type registry."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownNodeClassError(Mt2LinkError, ValueError):
    """Raised when no register map exists for the requested node class."""
