"""
Reference Validator - public entry point for repository reference checks.

Validation is purely structural: nothing here touches the network or the
file system. A reference that passes is safe to hand to a transport, which
picks SSH, HTTP(S), or a local path from ``ref.protocol_kind``.

Usage:
    from gitstore.adapters.repository import RepoRef, validate_ref

    ref = RepoRef(url="git@github.com:org/repo.git", private_key=key_bytes)
    validate_ref(ref)
    ref.protocol_kind  # ProtocolKind.SSH
    ref.user           # "git"
"""

from __future__ import annotations

import logging

from gitstore.common.logging import mask_credentials

from .classifier import DEFAULT_USER, classify
from .credentials import merge_credentials
from .grammar import match
from .models import (
    AuthPolicyError,
    ClassificationError,
    Credentials,
    GrammarError,
    ProtocolKind,
    RepoRef,
    ValidationError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "RefValidator",
    "check_auth_policy",
    "validate_ref",
]


def check_auth_policy(
    kind: ProtocolKind, credentials: Credentials, private_key: bytes | None
) -> None:
    """
    Check credential material against the requirements of a protocol kind.

    Raises:
        AuthPolicyError: If ssh has no private key, or http has exactly one
            of user and password
    """
    if kind is ProtocolKind.SSH and not private_key:
        raise AuthPolicyError("PrivateKey is required for ssh auth")
    if kind is ProtocolKind.HTTP and bool(credentials.user) != bool(credentials.password):
        raise AuthPolicyError(
            "For HTTP, both username and password are required, or neither"
        )


class RefValidator:
    """
    Validates repository references and fills in implied credentials.

    Args:
        default_user: User assumed for ssh and git transports when neither
            the caller nor the URL names one
    """

    def __init__(self, default_user: str = DEFAULT_USER):
        self.default_user = default_user

    def validate(self, ref: RepoRef) -> None:
        """
        Validate a reference in place.

        On success ``ref.protocol_kind`` is set and empty ``user``/``password``
        fields are filled from the URL. On failure the reference keeps its
        credentials and ``protocol_kind`` is cleared.

        Raises:
            GrammarError: URL is not a recognizable locator
            ClassificationError: No protocol kind could be determined
            AuthPolicyError: Credentials do not fit the protocol kind
        """
        try:
            kind, credentials = self._check(ref)
        except ValidationError as e:
            ref.protocol_kind = None
            logger.info(
                "Rejected repository reference %s: %s",
                mask_credentials(ref.url),
                mask_credentials(str(e)),
            )
            raise

        ref.user = credentials.user
        ref.password = credentials.password
        ref.protocol_kind = kind
        logger.debug(
            "Validated repository reference %s as %s",
            mask_credentials(ref.url),
            kind.value,
        )

    def _check(self, ref: RepoRef) -> tuple[ProtocolKind, Credentials]:
        try:
            found = match(ref.url)
        except GrammarError as e:
            raise GrammarError(f"unable to validate URL: {e}") from e
        if found is None:
            raise GrammarError(f"invalid git url: {ref.url}")

        try:
            parsed = classify(found, default_user=self.default_user)
        except ClassificationError as e:
            raise ClassificationError(f"unable to determine repository type: {e}") from e

        credentials = merge_credentials(ref.credentials, parsed.credentials)

        try:
            check_auth_policy(parsed.kind, credentials, ref.private_key)
        except AuthPolicyError as e:
            raise AuthPolicyError(f"invalid auth credentials: {e}") from e

        return parsed.kind, credentials


_default_validator = RefValidator()


def validate_ref(ref: RepoRef) -> None:
    """Validate a reference with the default settings. See RefValidator.validate."""
    _default_validator.validate(ref)
