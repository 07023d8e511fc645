"""Data layer utilities for loading JSON game definitions."""

from .errors import DataError, DataLoadError, DataNotFoundError, DataValidationError
from .paths import get_definitions_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataNotFoundError",
    "DataValidationError",
    "get_definitions_path",
    "get_repo_root",
]
