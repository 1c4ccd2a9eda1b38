"""Custom exception hierarchy for demo card loading."""


class DemoCardsError(Exception):
    """Base exception for all demo card errors."""


class CardNotFoundError(DemoCardsError, FileNotFoundError):
    """Card source file does not exist or is not readable."""


class ConfigParseError(DemoCardsError):
    """Front matter is not valid YAML or not a mapping."""


class InvalidCoverError(DemoCardsError):
    """Explicit cover path does not resolve to an existing file."""


class AmbiguousIdError(DemoCardsError):
    """Explicit id can be mistaken for an auto-generated anchor id."""


class UnsupportedKeyError(DemoCardsError):
    """Configuration key is not recognized by the card loader."""


class UnsupportedCardError(DemoCardsError):
    """No card loader registered for the file extension."""
