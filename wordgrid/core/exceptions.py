"""Custom exception hierarchy for word grid generation."""


class WordGridError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordGridError):
    """Raised when the requested grid dimensions are unusable."""


class DictionaryReadError(WordGridError):
    """Raised when the dictionary file cannot be opened or read."""


class ValidationError(WordGridError):
    """Raised when a completed grid fails its integrity checks."""


class SolverError(WordGridError):
    """Raised when the CP-SAT enumeration stops before it is complete."""
