"""Error types raised by the ingestion pipeline and session layer."""

from __future__ import annotations


class TradevalError(Exception):
    """Base class for errors surfaced to the user."""


class FormatError(TradevalError):
    """Raised when the source table cannot be parsed at all."""


class ValidationError(TradevalError):
    """Raised when a parsed table lacks the data needed to build a roster."""


class SizeError(TradevalError):
    """Raised when an upload exceeds the configured size limit."""


class FileTypeError(TradevalError):
    """Raised when an upload does not carry a delimited-text extension."""


class NoRosterError(TradevalError):
    """Raised when a trade is evaluated before any roster was loaded."""


__all__ = [
    "TradevalError",
    "FormatError",
    "ValidationError",
    "SizeError",
    "FileTypeError",
    "NoRosterError",
]
