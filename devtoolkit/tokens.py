"""Structural decoding of compact (JWT-style) tokens.

Only the header and payload are decoded. The signature segment is carried
along as opaque bytes and is never checked against any key.
"""
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from .codec import base64url_decode
from .errors import DecodeError, InvalidEncoding, InvalidJson, MalformedToken
from .formatter import strict_loads

logger = logging.getLogger(__name__)

JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


@dataclass(frozen=True)
class CompactToken:
    header: Dict[str, JsonValue]
    payload: Dict[str, JsonValue]
    signature: bytes
    raw: str


def _decode_segment(segment: str, label: str) -> dict:
    try:
        data = base64url_decode(segment)
    except DecodeError as e:
        raise InvalidEncoding(f"{label} is not valid Base64-URL: {e}") from e
    try:
        value = strict_loads(data.decode('utf-8'))
    except ValueError as e:
        raise InvalidJson(f"{label} is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise InvalidJson(f"{label} must be a JSON object, got {type(value).__name__}")
    return value

def decode(raw: str) -> CompactToken:
    token = raw.strip()
    parts = token.split('.')
    if len(parts) != 3 or not all(parts):
        raise MalformedToken(f"Expected 3 non-empty segments, got {len(parts)}")
    header = _decode_segment(parts[0], "Header")
    payload = _decode_segment(parts[1], "Payload")
    logger.debug("decoded token with %d header and %d payload claims", len(header), len(payload))
    return CompactToken(header, payload, parts[2].encode('utf-8'), token)


# ---------- Claims ----------
def _numeric_claim(token: CompactToken, name: str) -> Optional[float]:
    value = token.payload.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value

def _claim_datetime(token: CompactToken, name: str) -> Optional[datetime]:
    value = _numeric_claim(token, name)
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.debug("claim %s=%r is outside the representable range", name, value)
        return None

def expires_at(token: CompactToken) -> Optional[datetime]:
    return _claim_datetime(token, 'exp')

def issued_at(token: CompactToken) -> Optional[datetime]:
    return _claim_datetime(token, 'iat')

def is_expired(token: CompactToken, now: Optional[float] = None) -> bool:
    """True when the payload carries a numeric ``exp`` that lies in the past.

    ``now`` is in seconds and defaults to the current wall-clock time.
    """
    exp = _numeric_claim(token, 'exp')
    if exp is None:
        return False
    now_ms = (time.time() if now is None else now) * 1000
    return exp * 1000 < now_ms
