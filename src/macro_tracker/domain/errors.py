"""Domain errors."""


class InvalidArgumentError(ValueError):
    """Raised when a calculation receives input outside its domain."""
