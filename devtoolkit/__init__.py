"""Offline developer utilities: codecs, digests, UUIDs, JWT decoding, timestamps and JSON/YAML formatting."""
from .codec import (
    base64_decode,
    base64_encode,
    base64url_decode,
    base64url_encode,
    percent_decode,
    percent_encode,
)
from .digest import Algorithm, Digest, digest, digest_all
from .errors import DecodeError, ParseError, RangeError, ToolkitError
from .identifiers import generate_batch, generate_v4, generate_v5
from .namespaces import NAMESPACE_DNS, NAMESPACE_OID, NAMESPACE_URL, NAMESPACE_X500
from .timeconv import TimestampValue, from_iso, from_unix
from .tokens import CompactToken, decode as decode_token, is_expired

__version__ = '1.0.0'

__all__ = [
    "Algorithm",
    "CompactToken",
    "DecodeError",
    "Digest",
    "NAMESPACE_DNS",
    "NAMESPACE_OID",
    "NAMESPACE_URL",
    "NAMESPACE_X500",
    "ParseError",
    "RangeError",
    "TimestampValue",
    "ToolkitError",
    "base64_decode",
    "base64_encode",
    "base64url_decode",
    "base64url_encode",
    "decode_token",
    "digest",
    "digest_all",
    "from_iso",
    "from_unix",
    "generate_batch",
    "generate_v4",
    "generate_v5",
    "is_expired",
    "percent_decode",
    "percent_encode",
]
