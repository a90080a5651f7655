"""Exception hierarchy shared by the retrieval core and the HTTP layer."""


class SecondBrainError(Exception):
    """Base class for application errors."""


class InvalidInputError(SecondBrainError):
    """Required input is missing, empty, or not one of the accepted values."""


class ItemNotFoundError(SecondBrainError):
    """No knowledge item exists with the requested id."""

    def __init__(self, item_id: str):
        super().__init__(f"Knowledge item not found: {item_id}")
        self.item_id = item_id


class StorageError(SecondBrainError):
    """The document store could not complete an operation."""


class ServiceUnavailableError(SecondBrainError):
    """The generative model could not be reached or failed to answer."""
