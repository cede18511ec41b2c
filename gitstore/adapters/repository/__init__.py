"""Repository references - URL classification and credential validation.

This package parses free-form repository locators, decides which transport
they belong to, and checks the supplied credentials against that
transport's requirements.
"""

from __future__ import annotations

from .classifier import DEFAULT_USER, classify, parse_url
from .credentials import extract_credentials, merge_credentials, split_userinfo
from .grammar import GIT_URL_REGEX, match, matches
from .models import (
    AuthPolicyError,
    ClassificationError,
    Credentials,
    GrammarError,
    GrammarMatch,
    ParsedURL,
    ProtocolKind,
    RepoRef,
    RepositoryError,
    ValidationError,
)
from .validator import RefValidator, check_auth_policy, validate_ref

__all__ = [
    # Validator
    "RefValidator",
    "validate_ref",
    "check_auth_policy",
    # Parsing
    "GIT_URL_REGEX",
    "DEFAULT_USER",
    "match",
    "matches",
    "classify",
    "parse_url",
    "extract_credentials",
    "merge_credentials",
    "split_userinfo",
    # Models
    "RepoRef",
    "ProtocolKind",
    "Credentials",
    "GrammarMatch",
    "ParsedURL",
    # Exceptions
    "AuthPolicyError",
    "ClassificationError",
    "GrammarError",
    "RepositoryError",
    "ValidationError",
]
