#!/usr/bin/env python3
"""
Spell check a text file against a dictionary, suggesting corrections
ranked by a word frequency corpus.

    python check_spelling.py --dictionary dictionary.txt \
        --corpus wordprobabilityDatabase.txt inputtext.txt

Defaults come from SPELLBLOOM_* environment variables (see spellbloom/config.py).
"""
import argparse
import logging
import sys

from spellbloom.config import get_settings
from spellbloom.corrector import Corrector
from spellbloom.frequency import FrequencyTable
from spellbloom.lookup import SpellChecker
from spellbloom.membership import build_dictionary
from spellbloom.sources import read_corpus, read_dictionary_words, read_input_lines

logger = logging.getLogger("check_spelling")


def parse_args(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("input", nargs="?", default=settings.INPUT_PATH, help="text file to check")
    parser.add_argument("--dictionary", default=settings.DICTIONARY_PATH)
    parser.add_argument("--corpus", default=settings.CORPUS_PATH)
    parser.add_argument("--backend", choices=["bloom", "exact"], default=settings.DICTIONARY_BACKEND)
    parser.add_argument("--false-positive", type=float, default=settings.FALSE_POSITIVE_PROBABILITY,
                        help="target false positive probability of the Bloom filter")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser.parse_args(argv)


def build_checker(args) -> SpellChecker:
    settings = get_settings().model_copy(update={
        "DICTIONARY_BACKEND": args.backend,
        "FALSE_POSITIVE_PROBABILITY": args.false_positive,
    })

    dictionary = build_dictionary(read_dictionary_words(args.dictionary), settings)

    table = FrequencyTable.from_text(read_corpus(args.corpus))
    logger.info(f"📖 Corpus loaded: {table!r}")

    return SpellChecker(dictionary, Corrector(table, settings.MAX_EDIT2_WORD_LENGTH))


def main(argv=None, out=None) -> int:
    """Returns the number of tokens that needed a suggestion."""
    args = parse_args(argv)
    out = out or sys.stdout
    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s - %(name)s - %(message)s')

    checker = build_checker(args)
    logger.info(f"🔎 Checking {args.input}")

    unresolved = 0
    for line in read_input_lines(args.input):
        print(line, file=out)
        for result in checker.check_line(line):
            if result.is_known:
                continue
            unresolved += 1
            print(result.render() + "\n", file=out)

    logger.info(f"✅ Done. {unresolved} tokens needed a suggestion.")
    return unresolved


if __name__ == "__main__":
    main()
