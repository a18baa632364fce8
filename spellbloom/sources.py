"""
Sources - dictionary, corpus and input files

A missing or empty dictionary/corpus is not fatal: the core runs with an
empty set/table and every token ends up unresolved.
"""
import logging
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger("sources")

PathLike = Union[str, Path]


def _open_text(path: PathLike, kind: str):
    path = Path(path)
    if not path.is_file():
        logger.warning(f"⚠️ {kind} file {path} not found - continuing without it")
        return None
    return open(path, encoding="utf-8", errors="replace")


def read_dictionary_words(path: PathLike) -> Iterator[str]:
    """Whitespace-delimited words, any number per line."""
    f = _open_text(path, "Dictionary")
    if f is None:
        return
    count = 0
    with f:
        for line in f:
            for word in line.split():
                count += 1
                yield word
    if count == 0:
        logger.warning(f"⚠️ Dictionary file {path} is empty")


def read_corpus(path: PathLike) -> str:
    f = _open_text(path, "Corpus")
    if f is None:
        return ""
    with f:
        text = f.read()
    if not text.strip():
        logger.warning(f"⚠️ Corpus file {path} is empty - no corrections will be suggested")
    return text


def read_input_lines(path: PathLike) -> Iterator[str]:
    f = _open_text(path, "Input")
    if f is None:
        return
    with f:
        for line in f:
            yield line.rstrip("\n")
