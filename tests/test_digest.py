import hashlib
from concurrent.futures import ThreadPoolExecutor

import pytest

from spellbloom.digest import DigestProvider, get_digest_provider
from spellbloom.errors import DigestUnavailableError


def test_md5_digest_matches_hashlib():
    provider = DigestProvider("md5")
    assert provider.digest(b"hello0") == hashlib.md5(b"hello0").digest()
    assert provider.digest_size == 16


def test_digest_is_repeatable():
    provider = DigestProvider()
    assert provider.digest(b"abc") == provider.digest(b"abc")
    assert provider.digest(b"abc") != provider.digest(b"abd")


def test_hash32_reads_first_four_bytes_big_endian():
    provider = DigestProvider("md5")
    raw = hashlib.md5("book3".encode("utf-8")).digest()
    assert provider.hash32("book3") == int.from_bytes(raw[:4], "big")
    assert 0 <= provider.hash32("book3") < 2 ** 32


def test_other_algorithms():
    provider = DigestProvider("sha256")
    assert provider.digest_size == 32
    assert provider.digest(b"x") == hashlib.sha256(b"x").digest()


@pytest.mark.parametrize("name", ["no-such-hash", "shake_128"])
def test_unavailable_algorithm_is_fatal(name):
    with pytest.raises(DigestUnavailableError):
        DigestProvider(name)


def test_shared_provider_is_cached():
    assert get_digest_provider("md5") is get_digest_provider("md5")


def test_concurrent_calls_do_not_interfere():
    provider = get_digest_provider("md5")
    inputs = [f"word{i}".encode() for i in range(2000)]
    expected = [hashlib.md5(data).digest() for data in inputs]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(provider.digest, inputs))

    assert results == expected
