"""
Grammar Matcher - lexical shapes accepted as repository locators.

A single pattern covers both locator families:

1. Scheme-prefixed: ``ssh://user@host/path``, ``https://u:p@host/repo.git``,
   ``file:///srv/repo``, ``git://host/repo``, ``rsync://host/repo``
2. Schemeless SCP-style: ``git@host:org/repo.git``, ``host:org/repo``

The pattern is searched rather than anchored and the scheme alternative is
tried first at every position, so an explicit protocol keyword always beats
the SCP reading of the same text. Because the search is leftmost-first and
userinfo segments cannot contain ``@``, only the rightmost ``@`` in front of
the host ends up in a capture group.

Usage:
    from gitstore.adapters.repository.grammar import match

    result = match("git@github.com:org/repo.git")
    if result is not None:
        print(result.scp_userinfo)  # "git@"
"""

from __future__ import annotations

import logging
import re

from gitstore.common.logging import mask_credentials

from .models import GrammarError, GrammarMatch

logger = logging.getLogger(__name__)

__all__ = [
    "GIT_URL_REGEX",
    "GROUP_NAMES",
    "match",
    "matches",
]

GIT_URL_REGEX = re.compile(
    r"""
    (?:
        (?P<scheme>git|ssh|file|rsync|https?)          # explicit protocol token
      | (?P<scp_host>
            (?P<scp_userinfo>\w+[:\w]+?@)?             # user[:pass]@ before an SCP host
            [\w.]+
        )
    )
    (?P<separator>:(?://)?)                            # ':' or '://'
    (?P<url_userinfo>\w+[:\w]+?@)?                     # user[:pass]@ after the separator
    (?P<body>[\w.:/\-~]+)
    (?P<suffix>\.git)?
    (?P<trailing_slash>/)?
    """,
    re.VERBOSE | re.ASCII,
)
"""Combined scheme-prefixed / SCP-style repository locator pattern."""

GROUP_NAMES = (
    "scheme",
    "scp_host",
    "scp_userinfo",
    "separator",
    "url_userinfo",
    "body",
    "suffix",
    "trailing_slash",
)


def _check_arity(pattern: re.Pattern[str]) -> None:
    names = tuple(sorted(pattern.groupindex, key=pattern.groupindex.__getitem__))
    if pattern.groups != len(GROUP_NAMES) or names != GROUP_NAMES:
        raise GrammarError(
            f"should have matched {len(GROUP_NAMES)} capture groups, "
            f"matched {pattern.groups}"
        )


def match(url: str, pattern: re.Pattern[str] = GIT_URL_REGEX) -> GrammarMatch | None:
    """
    Match a URL against the locator grammar.

    Args:
        url: Free-form repository locator
        pattern: Compiled pattern to use; must expose the named groups in
            GROUP_NAMES

    Returns:
        GrammarMatch with the decomposed groups, or None if nothing in the
        string looks like a locator

    Raises:
        GrammarError: If the pattern does not decompose into the expected
            groups
    """
    _check_arity(pattern)

    found = pattern.search(url)
    if found is None:
        logger.debug("No repository locator found in %s", mask_credentials(url))
        return None

    groups = found.groupdict(default="")
    return GrammarMatch(
        text=found.group(0),
        scheme=groups["scheme"],
        scp_userinfo=groups["scp_userinfo"],
        separator=groups["separator"],
        url_userinfo=groups["url_userinfo"],
        body=groups["body"],
        suffix=groups["suffix"],
        trailing_slash=groups["trailing_slash"],
    )


def matches(url: str) -> bool:
    """Check whether any part of the URL matches the locator grammar."""
    return match(url) is not None
