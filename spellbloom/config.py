"""
Spellbloom Configuration
"""
from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Dictionary backend
    DICTIONARY_BACKEND: Literal["bloom", "exact"] = "bloom"

    # Bloom filter (probability form)
    FALSE_POSITIVE_PROBABILITY: float = Field(default=0.24, gt=0.0, lt=1.0)
    EXPECTED_ELEMENTS: int = Field(default=99000, gt=0)

    # Bloom filter (explicit form) - used when both are set
    BITS_PER_ELEMENT: Optional[float] = Field(default=None, gt=0.0)
    HASH_ROUNDS: Optional[int] = Field(default=None, gt=0)

    # Hash family
    DIGEST_ALGORITHM: str = "md5"

    # Corrector
    MAX_EDIT2_WORD_LENGTH: int = Field(default=15, ge=0)  # distance-2 round is O((53L+25)^2)

    # Sources
    DICTIONARY_PATH: str = "dictionary.txt"
    CORPUS_PATH: str = "wordprobabilityDatabase.txt"
    INPUT_PATH: str = "inputtext.txt"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def uses_explicit_filter_parameters(self) -> bool:
        return self.BITS_PER_ELEMENT is not None and self.HASH_ROUNDS is not None

    @model_validator(mode="after")
    def check_explicit_filter_parameters(self) -> "Settings":
        # (c, n, k) is all or nothing
        if (self.BITS_PER_ELEMENT is None) != (self.HASH_ROUNDS is None):
            raise ValueError("BITS_PER_ELEMENT and HASH_ROUNDS must be set together")
        return self

    class Config:
        env_file = ".env"
        env_prefix = "SPELLBLOOM_"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
