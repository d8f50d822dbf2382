class FlatDocError(Exception):
    """Base class for every error raised by the document store."""


class StorageError(FlatDocError, OSError):
    """Creating the data directory or writing a collection file failed."""


class CollectionNotFound(FlatDocError, FileNotFoundError):
    """A collection file was read before it was ever registered."""

    def __init__(self, collection: str, path=None):
        self.collection = collection
        self.path = path
        super().__init__(f"Collection not found: {collection}")


class CollectionParseError(FlatDocError, ValueError):
    """A collection file does not hold a JSON array."""

    def __init__(self, collection: str, reason: str):
        self.collection = collection
        self.reason = reason
        super().__init__(f"Collection {collection!r} is not valid: {reason}")


class InvalidCollectionName(FlatDocError, ValueError):
    pass


class StoreNotConnected(FlatDocError, RuntimeError):
    pass
