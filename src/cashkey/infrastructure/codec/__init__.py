"""State codec: the whole cash flow state as a URL-safe string."""

from cashkey.infrastructure.codec.address import (
    fragment_from_url,
    resolve_fragment,
    url_with_fragment,
)
from cashkey.infrastructure.codec.state_codec import (
    FORMAT_VERSION,
    STATE_QUERY_KEY,
    UrlStateCodec,
    decode,
    encode,
)

__all__ = [
    "FORMAT_VERSION",
    "STATE_QUERY_KEY",
    "UrlStateCodec",
    "decode",
    "encode",
    "fragment_from_url",
    "resolve_fragment",
    "url_with_fragment",
]
