"""Reading and writing the state fragment of a page address."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit, urlunsplit

from cashkey.infrastructure.codec.state_codec import STATE_QUERY_KEY


def fragment_from_url(url: str) -> str | None:
    """Extract the state string from a full address.

    The fragment wins; a ``?s=`` query parameter is accepted as well.
    """
    parts = urlsplit(url)
    if parts.fragment:
        return parts.fragment

    values = parse_qs(parts.query).get(STATE_QUERY_KEY)
    if values:
        return values[0]
    return None


def url_with_fragment(base_url: str, fragment: str) -> str:
    """Replace the fragment of ``base_url``, keeping path and query."""
    return urlunsplit(urlsplit(base_url)._replace(fragment=fragment))


def resolve_fragment(value: str) -> str | None:
    """Accept either a full address or a bare fragment."""
    if "://" in value:
        return fragment_from_url(value)
    return value
