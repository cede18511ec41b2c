"""gitstore - classify and validate git repository references."""

from __future__ import annotations

from gitstore.adapters.repository import (
    ProtocolKind,
    RefValidator,
    RepoRef,
    parse_url,
    validate_ref,
)

__all__ = [
    "ProtocolKind",
    "RefValidator",
    "RepoRef",
    "parse_url",
    "validate_ref",
]

__version__ = "0.1.0"
