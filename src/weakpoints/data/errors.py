"""Exceptions raised while loading weakpoint definition data."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when definition files are missing or contain invalid JSON."""


class DataValidationError(DataError):
    """Raised when definition content fails structural or range validation."""


class DataReferenceError(DataError):
    """Raised when definitions reference unknown effects or proficiencies."""
