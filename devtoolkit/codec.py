"""Base64, Base64-URL and percent-encoding codecs."""
import base64
import binascii
import logging
import re
from urllib.parse import quote, unquote_to_bytes

from .errors import InvalidCharacter, InvalidEscape, InvalidPadding, InvalidUtf8

logger = logging.getLogger(__name__)

B64_BODY = re.compile(r'[A-Za-z0-9+/]*')
B64URL_BODY = re.compile(r'[A-Za-z0-9_-]*')
BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')
WHITESPACE = re.compile(r'[\t\n\f\r ]+')


# ---------- Helpers ----------
def to_bytes(data, encoding='utf-8') -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    return str(data).encode(encoding)

def to_hex(b: bytes) -> str:
    return binascii.hexlify(b).decode('ascii')

def from_hex(s: str) -> bytes:
    s = s.strip().replace(" ", "").replace("0x", "")
    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError) as e:
        raise InvalidCharacter(f"Invalid hex input: {e}") from e

def _check_body(body: str, pattern, label: str) -> None:
    if pattern.fullmatch(body):
        return
    if '=' in body:
        raise InvalidPadding(f"Misplaced {label} padding")
    ch = body[pattern.match(body).end()]
    raise InvalidCharacter(f"Invalid {label} character: {ch!r}")

def _pad(body: str) -> str:
    if len(body) % 4 == 1:
        raise InvalidPadding("Invalid Base64 length")
    return body + '=' * (-len(body) % 4)


# ---------- Base64 (standard alphabet) ----------
def base64_encode(data) -> str:
    return base64.b64encode(to_bytes(data)).decode('ascii')

def base64_decode(text: str) -> bytes:
    s = WHITESPACE.sub('', text)
    body = s.rstrip('=')
    _check_body(body, B64_BODY, "Base64")
    padding = len(s) - len(body)
    if padding:
        if padding > 2 or len(s) % 4:
            raise InvalidPadding("Invalid Base64 padding")
    else:
        s = _pad(body)
    try:
        return base64.b64decode(s, validate=True)
    except binascii.Error as e:
        raise InvalidPadding(f"Invalid Base64 padding: {e}") from e


# ---------- Base64-URL (RFC 4648 §5, unpadded) ----------
def base64url_encode(data) -> str:
    return base64.urlsafe_b64encode(to_bytes(data)).rstrip(b'=').decode('ascii')

def base64url_decode(text: str) -> bytes:
    body = text.strip().rstrip('=')
    _check_body(body, B64URL_BODY, "Base64-URL")
    try:
        return base64.urlsafe_b64decode(_pad(body))
    except binascii.Error as e:
        raise InvalidPadding(f"Invalid Base64-URL padding: {e}") from e


# ---------- Percent-encoding (RFC 3986) ----------
def percent_encode(text: str) -> str:
    # with safe='' only the unreserved set A-Z a-z 0-9 - _ . ~ is left as is
    return quote(text, safe='', encoding='utf-8', errors='strict')

def percent_decode(text: str) -> str:
    m = BAD_ESCAPE.search(text)
    if m:
        raise InvalidEscape(f"Invalid percent-escape at position {m.start()}: {text[m.start():m.start() + 3]!r}")
    raw = unquote_to_bytes(text)
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.debug("percent-decoded %d bytes are not UTF-8", len(raw))
        raise InvalidUtf8(f"Decoded bytes are not valid UTF-8: {e.reason}") from e
