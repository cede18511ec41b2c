"""
Credential Extractor - user/password recovery from matched URLs.

Pure functions, no validation of character sets. The caller-wins merge
lives here as well so it can be exercised without parsing anything.
"""

from __future__ import annotations

from .models import Credentials, GrammarMatch

__all__ = [
    "extract_credentials",
    "merge_credentials",
    "split_userinfo",
]


def split_userinfo(userinfo: str) -> Credentials:
    """
    Split a ``user[:pass]@`` segment into its parts.

    The split happens on the first ``:``, so a password may itself
    contain colons.

    Examples:
        >>> split_userinfo("alice:s3cret@")
        Credentials(user='alice', password='s3cret')
        >>> split_userinfo("git@")
        Credentials(user='git', password='')
    """
    userinfo = userinfo.rstrip("@")
    user, _, password = userinfo.partition(":")
    return Credentials(user=user, password=password)


def extract_credentials(match: GrammarMatch) -> Credentials:
    """
    Pull credentials out of whichever userinfo slot the match populated.

    The segment after the separator wins when both slots are filled, as in
    ``u1@host:u2@path``.
    """
    userinfo = match.url_userinfo or match.scp_userinfo
    if not userinfo:
        return Credentials()
    return split_userinfo(userinfo)


def merge_credentials(supplied: Credentials, extracted: Credentials) -> Credentials:
    """
    Merge caller-supplied credentials with ones recovered from the URL.

    Each field independently keeps the supplied value when it is non-empty
    and falls back to the extracted one otherwise.
    """
    return Credentials(
        user=supplied.user or extracted.user,
        password=supplied.password or extracted.password,
    )
