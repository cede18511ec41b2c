"""
Shared data models and exceptions for repository references.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

# Re-export exceptions so adapter users need a single import
from gitstore.common.exceptions import AuthPolicyError as AuthPolicyError
from gitstore.common.exceptions import ClassificationError as ClassificationError
from gitstore.common.exceptions import GrammarError as GrammarError
from gitstore.common.exceptions import RepositoryError as RepositoryError
from gitstore.common.exceptions import ValidationError as ValidationError
from gitstore.common.logging import mask_credentials

__all__ = [
    # Exceptions (re-exported)
    "AuthPolicyError",
    "ClassificationError",
    "GrammarError",
    "RepositoryError",
    "ValidationError",
    # Models
    "ProtocolKind",
    "Credentials",
    "GrammarMatch",
    "ParsedURL",
    "RepoRef",
]


class ProtocolKind(str, Enum):
    """Transport family a repository URL belongs to."""

    HTTP = "http"
    SSH = "ssh"
    FILE = "file"
    GIT = "git"
    RSYNC = "rsync"


@dataclass(frozen=True)
class Credentials:
    """A user/password pair. Empty strings mean unset."""

    user: str = ""
    password: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.user and not self.password


@dataclass(frozen=True)
class GrammarMatch:
    """Decomposed capture groups of one successful URL match.

    ``scheme`` is empty for schemeless SCP-style matches, where the host is
    only part of ``text``. ``scp_userinfo`` is the ``user[:pass]@`` segment in
    front of an SCP-style host; ``url_userinfo`` is the one following the
    separator.
    """

    text: str
    scheme: str = ""
    scp_userinfo: str = ""
    separator: str = ""
    url_userinfo: str = ""
    body: str = ""
    suffix: str = ""
    trailing_slash: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ParsedURL:
    """Classification result: protocol kind plus the credentials it implies."""

    kind: ProtocolKind
    user: str = ""
    password: str = ""

    @property
    def credentials(self) -> Credentials:
        return Credentials(user=self.user, password=self.password)


@dataclass(repr=False)
class RepoRef:
    """All information required to connect to a git repository.

    ``protocol_kind`` is only set by a successful validation; transport
    selection downstream reads it to decide between SSH, HTTP(S), or a
    local path.
    """

    url: str
    user: str = ""
    password: str = ""
    private_key: bytes = b""
    protocol_kind: ProtocolKind | None = field(default=None, init=False)

    def __repr__(self) -> str:
        kind = self.protocol_kind.value if self.protocol_kind else None
        return (
            f"RepoRef(url={mask_credentials(self.url)!r}, user={self.user!r}, "
            f"password={'***' if self.password else ''!r}, "
            f"private_key={'<set>' if self.private_key else '<unset>'}, "
            f"protocol_kind={kind!r})"
        )

    @property
    def is_validated(self) -> bool:
        """True once a validation has succeeded."""
        return self.protocol_kind is not None

    @property
    def requires_private_key(self) -> bool:
        return self.protocol_kind is ProtocolKind.SSH

    @property
    def credentials(self) -> Credentials:
        return Credentials(user=self.user, password=self.password)

    def validate(self) -> None:
        """Validate this reference in place. See validator.validate_ref."""
        from .validator import validate_ref

        validate_ref(self)
