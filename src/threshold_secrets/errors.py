"""Error taxonomy for share splitting and reconstruction."""


class SharingError(ValueError):
    """Base class for invalid split/combine input."""


class ConfigurationError(SharingError):
    """Raised for out-of-range share counts, thresholds or an empty secret."""


class MalformedShareError(SharingError):
    """Raised when a share carries a zero or duplicate x-coordinate."""


class LengthMismatchError(SharingError):
    """Raised when shares differ in length or are too short to hold a y-value."""
