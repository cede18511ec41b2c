"""
Exception hierarchy for gitstore.

All errors raised by the package derive from GitstoreError so callers can
catch everything from one place. Adapter packages re-export the exceptions
they raise from their own models module.
"""

from __future__ import annotations

__all__ = [
    "GitstoreError",
    "ConfigurationError",
    "RepositoryError",
    "ValidationError",
    "GrammarError",
    "ClassificationError",
    "AuthPolicyError",
]


class GitstoreError(Exception):
    """Base exception for all gitstore errors."""


class ConfigurationError(GitstoreError):
    """Raised when settings or CLI inputs cannot be used."""


class RepositoryError(GitstoreError):
    """Base exception for repository reference operations."""


class ValidationError(RepositoryError):
    """Raised when a repository reference is unusable for connecting."""


class GrammarError(ValidationError):
    """The URL does not look like any recognized repository locator.

    Also raised when the compiled pattern does not decompose into the
    expected capture groups, which is an internal consistency failure
    rather than bad input.
    """


class ClassificationError(ValidationError):
    """The URL matched but no protocol kind could be determined."""


class AuthPolicyError(ValidationError):
    """The credentials present do not satisfy the protocol's requirements."""
