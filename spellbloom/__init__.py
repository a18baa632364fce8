"""
Spellbloom - Bloom filter dictionary + frequency-ranked spelling correction

A spell checker with:
- Tunable-accuracy dictionary (Bloom filter) or exact set
- Edit distance 1 and 2 candidate generation
- Corpus frequency ranking of suggestions
- Punctuation-aware token lookup

Modules:
- bloom: Bloom filter sized from (c, n, k) or a false positive target
- config: Settings (pydantic-settings, SPELLBLOOM_* env vars)
- corrector: Frequency-ranked Norvig corrector
- digest: hashlib wrapper used as the Bloom hash family
- edits: One-edit candidate generator
- errors: Exception taxonomy
- frequency: Word frequency table from a corpus
- lookup: Per-token decision flow
- membership: Dictionary capability and backend factory
- sources: Dictionary/corpus/input file readers
"""

__version__ = "1.0.0"
