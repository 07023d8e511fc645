"""Custom exceptions for game-data loading and validation."""

from ttksim.domain.errors import ValidationError


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when definition files are missing or are not valid JSON."""


class DataValidationError(DataError, ValidationError):
    """Raised when JSON content fails structural validation."""


class DataNotFoundError(DataError, KeyError):
    """Raised when a champion, item, or rune id is not defined."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
