import os

import pytest

from spellbloom.bloom import BloomFilter
from spellbloom.config import get_settings
from spellbloom.corrector import Corrector
from spellbloom.frequency import FrequencyTable
from spellbloom.lookup import SpellChecker
from spellbloom.membership import ExactSet

DICTIONARY_WORDS = ["the", "book", "she", "watch", "cat", "dog", "said", "hello"]

CORPUS = """
The cat sat on the mat. The dog chased the cat.
She said hello to the dog, and the dog said nothing.
A book about a cat; the book was read by her.
"""


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    for name in list(os.environ):
        if name.startswith("SPELLBLOOM_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def table() -> FrequencyTable:
    return FrequencyTable.from_text(CORPUS)


@pytest.fixture
def exact_dictionary() -> ExactSet:
    dictionary = ExactSet()
    dictionary.add_all(DICTIONARY_WORDS)
    return dictionary


@pytest.fixture
def bloom_dictionary() -> BloomFilter:
    dictionary = BloomFilter.from_probability(0.01, 100)
    dictionary.add_all(DICTIONARY_WORDS)
    return dictionary


@pytest.fixture
def checker(exact_dictionary, table) -> SpellChecker:
    return SpellChecker(exact_dictionary, Corrector(table))
