"""Domain-level exceptions."""


class ValidationError(ValueError):
    """Raised when caller-supplied stat input is out of range or malformed."""
