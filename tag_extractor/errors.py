"""Exceptions raised by tag extraction"""


class TagExtractorError(Exception):
    """Base class for tag extraction errors"""


class MissingSeparatorError(TagExtractorError):
    """No tag separator was passed and no global separator is set"""

    def __init__(self, message: str = "Could not find any tag separator"):
        super().__init__(message)


class InvalidContainerError(TagExtractorError, ValueError):
    """A multiword container is not an (open, close) pair of characters"""

    def __init__(self, container):
        self.container = container
        super().__init__(
            f"Tag container must be exactly two characters, got {container!r}"
        )


# Name used by earlier releases
TagSeparatorError = MissingSeparatorError

__all__ = [
    'TagExtractorError',
    'MissingSeparatorError',
    'InvalidContainerError',
    'TagSeparatorError',
]
