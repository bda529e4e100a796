"""
Exceptions raised by the Piplop SDK.

Every failure surfaces as a subclass of PiplopError so callers can catch the
whole family at the CLI boundary.
"""


class PiplopError(Exception):
    """Base class for all SDK errors."""

    prefix = "Piplop error"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class InvalidStoryboardError(PiplopError):
    """The storyboard document is not acceptable."""

    prefix = "Invalid storyboard"


class StoryboardValidationError(InvalidStoryboardError):
    """A validation rule (non-empty title, positive duration) failed."""

    prefix = "Validation error"


class StoryboardParseError(InvalidStoryboardError):
    """Text is not JSON or does not match the storyboard shape."""

    prefix = "JSON error"


class StoryboardFileNotFoundError(PiplopError):
    """The storyboard file could not be read."""

    prefix = "File not found"


class StoryboardIOError(PiplopError):
    prefix = "IO error"


class TransportError(PiplopError):
    """The request could not be sent or the response could not be decoded."""

    prefix = "HTTP error"


class StoryProtocolError(PiplopError):
    """The registration service rejected the request or answered malformed."""

    prefix = "Story Protocol error"
