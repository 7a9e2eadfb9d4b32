import hashlib
import logging
from dataclasses import dataclass
from enum import Enum

from .codec import to_bytes
from .errors import UnknownAlgorithm

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    MD5 = 'md5'
    SHA1 = 'sha1'
    SHA256 = 'sha256'
    SHA512 = 'sha512'

    @property
    def hex_length(self) -> int:
        return _HASHERS[self]().digest_size * 2

    @classmethod
    def parse(cls, name: str) -> 'Algorithm':
        key = name.strip().lower().replace('-', '').replace('_', '')
        for algo in cls:
            if algo.value == key:
                return algo
        raise UnknownAlgorithm(f"Unknown hash algorithm: {name!r}")


_HASHERS = {
    Algorithm.MD5: hashlib.md5,
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}


@dataclass(frozen=True)
class Digest:
    algorithm: Algorithm
    hex: str

    def raw(self) -> bytes:
        return bytes.fromhex(self.hex)

    def __str__(self):
        return self.hex


def digest(data, algorithm: Algorithm = Algorithm.SHA256) -> Digest:
    """Hash ``data`` (bytes, or text encoded as UTF-8) and return the lowercase hex digest."""
    if isinstance(algorithm, str):
        algorithm = Algorithm.parse(algorithm)
    buf = to_bytes(data)
    logger.debug("hashing %d bytes with %s", len(buf), algorithm.name)
    return Digest(algorithm, _HASHERS[algorithm](buf).hexdigest())

def digest_all(data) -> dict:
    buf = to_bytes(data)
    return {algo: digest(buf, algo) for algo in Algorithm}
