"""Errors raised by the review stores."""


class StoreError(Exception):
    """Base class for document store failures."""


class StoreUnavailableError(StoreError):
    """The review document could not be read."""


class StoreWriteError(StoreError):
    """The review document could not be replaced."""
