"""RFC 4122 identifiers: random (v4) and name-based SHA-1 (v5)."""
import logging
import os
import uuid

from .codec import to_hex
from .digest import Algorithm, digest
from .errors import InvalidNamespace, RangeError
from .namespaces import ALIASES, NAMESPACE_DNS

logger = logging.getLogger(__name__)

MIN_BATCH = 1
MAX_BATCH = 100


def _stamp(raw: bytes, version: int) -> uuid.UUID:
    b = bytearray(raw[:16])
    b[6] = (b[6] & 0x0F) | (version << 4)
    b[8] = (b[8] & 0x3F) | 0x80  # variant 10
    h = to_hex(bytes(b))
    return uuid.UUID(f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}")

def parse_namespace(value) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    text = str(value).strip()
    if text.lower() in ALIASES:
        return ALIASES[text.lower()]
    try:
        return uuid.UUID(text)
    except ValueError as e:
        raise InvalidNamespace(f"Invalid namespace UUID: {text!r}") from e

def generate_v4() -> uuid.UUID:
    return _stamp(os.urandom(16), 4)

def generate_v5(namespace=NAMESPACE_DNS, name: str = '') -> uuid.UUID:
    ns = parse_namespace(namespace)
    sha1 = digest(ns.bytes + name.encode('utf-8'), Algorithm.SHA1)
    return _stamp(sha1.raw(), 5)

def generate_batch(count: int) -> list:
    if isinstance(count, bool) or not isinstance(count, int):
        raise RangeError(f"count must be an integer, got {count!r}")
    if not MIN_BATCH <= count <= MAX_BATCH:
        raise RangeError(f"count must be between {MIN_BATCH} and {MAX_BATCH}, got {count}")
    logger.debug("generating %d v4 uuids", count)
    return [generate_v4() for _ in range(count)]
