"""
Exception taxonomy.

Misconfiguration is raised at construction time. A missing correction is not an
error (see corrector.NoSuggestionFound).
"""


class SpellbloomError(Exception):
    """Base class for all spellbloom errors"""


class InvalidParameterError(SpellbloomError, ValueError):
    """Filter parameters out of range (n, c, k <= 0 or p outside (0, 1))"""


class DigestUnavailableError(SpellbloomError, RuntimeError):
    """Requested hash algorithm is not provided by hashlib"""
