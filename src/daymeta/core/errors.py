class DaymetaError(Exception):
    """Base error."""

class ConversionError(DaymetaError):
    """Raised when a date cannot be converted to the lunar calendar."""

class InvalidAnniversaryKind(DaymetaError, ValueError):
    """Raised when an anniversary record carries an unknown match kind."""

class UnknownProviderError(DaymetaError, KeyError):
    """Raised when a lunar provider name is not registered."""
