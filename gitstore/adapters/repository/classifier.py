"""
Protocol Classifier - decides which transport a matched URL belongs to.

Classification priority order:
1. Explicit scheme token (ssh, http, https, file, rsync, git)
2. SCP-style heuristic for schemeless matches:
   - an ``@`` anywhere in the matched text means ``user@host:path``
   - a bare ``:`` separator means ``host:path``

Only ssh and git transports get a default user; http, file, and rsync keep
whatever the URL carried.

Known ambiguity: a drive-letter path such as ``C:path`` satisfies the bare
``:`` rule and is classified as ssh.
"""

from __future__ import annotations

import logging

from gitstore.common.logging import mask_credentials

from .credentials import extract_credentials
from .grammar import match
from .models import ClassificationError, GrammarError, GrammarMatch, ParsedURL, ProtocolKind

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_USER",
    "SCHEME_KINDS",
    "classify",
    "parse_url",
]

DEFAULT_USER = "git"

SCHEME_KINDS: dict[str, ProtocolKind] = {
    "ssh": ProtocolKind.SSH,
    "http": ProtocolKind.HTTP,
    "https": ProtocolKind.HTTP,
    "file": ProtocolKind.FILE,
    "rsync": ProtocolKind.RSYNC,
    "git": ProtocolKind.GIT,
}
"""Scheme token -> protocol kind. Every token the grammar accepts is listed."""

_DEFAULT_USER_KINDS = frozenset({ProtocolKind.SSH, ProtocolKind.GIT})


def _classify_schemeless(match: GrammarMatch) -> ProtocolKind:
    # user@host:path
    if "@" in match.text:
        return ProtocolKind.SSH
    # host:path
    if match.separator == ":":
        return ProtocolKind.SSH
    raise ClassificationError("unable to determine repository type")


def classify(match: GrammarMatch, default_user: str = DEFAULT_USER) -> ParsedURL:
    """
    Determine the protocol kind and implied credentials of a matched URL.

    Args:
        match: Decomposed grammar match
        default_user: User assumed for ssh and git transports when the URL
            names none

    Returns:
        ParsedURL with the kind and the extracted (or defaulted) credentials

    Raises:
        ClassificationError: If the match has no scheme and does not look
            like an SCP-style locator
    """
    credentials = extract_credentials(match)
    user, password = credentials.user, credentials.password

    if match.scheme:
        kind = SCHEME_KINDS.get(match.scheme)
        if kind is None:
            raise ClassificationError(f"unsupported scheme: {match.scheme}")
        if kind in _DEFAULT_USER_KINDS and not user:
            user = default_user
        return ParsedURL(kind=kind, user=user, password=password)

    # SSH only beyond this point
    if not user:
        user = default_user
    kind = _classify_schemeless(match)
    return ParsedURL(kind=kind, user=user, password=password)


def parse_url(url: str, default_user: str = DEFAULT_USER) -> ParsedURL:
    """
    Match and classify a URL without applying any auth policy.

    Raises:
        GrammarError: If the URL does not match the locator grammar
        ClassificationError: If no protocol kind can be determined
    """
    found = match(url)
    if found is None:
        raise GrammarError(f"invalid git url: {url}")

    parsed = classify(found, default_user=default_user)
    logger.debug(
        "Classified %s as %s (user=%s)",
        mask_credentials(url),
        parsed.kind.value,
        parsed.user,
    )
    return parsed
