# crud/errors.py — failures raised by the lookup and workflow helpers


class StoreError(Exception):
    """Base class for bookstore storage failures."""


class NotFound(StoreError):
    """The requested row does not exist (or was consumed concurrently)."""


class OutOfStock(StoreError):
    """A purchase would take a book's quantity below zero."""
