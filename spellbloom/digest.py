"""
Digest Provider - hash family source for the Bloom filter

A single digest primitive (MD5 by default) is turned into k "independent"
hash functions by salting the input with the round number:

    h_x(e) = first4bytes(digest(canonical(e) + str(x)))

Every call builds a fresh hashlib context, so a provider can be shared freely
between filters and threads.
"""
import hashlib
import logging
from functools import lru_cache

from .errors import DigestUnavailableError

logger = logging.getLogger("digest")

DEFAULT_ALGORITHM = "md5"


class DigestProvider:
    """Stateless wrapper around a hashlib algorithm."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        try:
            probe = hashlib.new(algorithm, usedforsecurity=False)
        except (ValueError, TypeError) as e:
            logger.error(f"❌ Digest algorithm '{algorithm}' unavailable: {e}")
            raise DigestUnavailableError(f"hash algorithm '{algorithm}' is not available") from e

        # Variable-length digests (shake_*) have no fixed size
        if probe.digest_size < 4:
            raise DigestUnavailableError(
                f"hash algorithm '{algorithm}' does not produce a fixed-size digest of at least 4 bytes"
            )

        self.algorithm = algorithm
        self.digest_size = probe.digest_size

    def digest(self, data: bytes) -> bytes:
        return hashlib.new(self.algorithm, data, usedforsecurity=False).digest()

    def hash32(self, text: str) -> int:
        """
        Digest the UTF-8 text and read the first 4 bytes as an
        unsigned big-endian 32-bit integer.
        """
        return int.from_bytes(self.digest(text.encode("utf-8"))[:4], "big")

    def __repr__(self) -> str:
        return f"DigestProvider({self.algorithm!r})"


@lru_cache()
def get_digest_provider(algorithm: str = DEFAULT_ALGORITHM) -> DigestProvider:
    """Get or create a shared provider for the algorithm"""
    return DigestProvider(algorithm)
