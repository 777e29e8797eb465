"""Exceptions raised by the Aptitude Arena core."""


class AptitudeArenaError(Exception):
    """Base class for all Aptitude Arena errors."""


class RemoteStoreError(AptitudeArenaError):
    """The remote document store could not be read or written."""


class MalformedDocumentError(AptitudeArenaError, ValueError):
    """A stored document does not match the expected record shape."""


class SessionStateError(AptitudeArenaError):
    """A game session was used out of order (e.g. answered twice)."""


class QuestionPoolExhaustedError(AptitudeArenaError):
    """
    A generator could not produce enough distinct prompts within its budget.

    Attributes:
        category: Category id of the generator.
        requested: Number of questions asked for.
        produced: Number of distinct questions collected before giving up.
    """

    def __init__(self, category: str, requested: int, produced: int):
        self.category = category
        self.requested = requested
        self.produced = produced
        super().__init__(
            f"Could only generate {produced} of {requested} distinct "
            f"{category} questions"
        )
