"""Custom exception hierarchy for the word unscrambler."""


class UnscramblerError(Exception):
    """Base exception for unscrambler failures."""


class DictionaryLoadError(UnscramblerError):
    """Raised when no word list can be read for the requested dictionary."""
