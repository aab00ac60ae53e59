"""Exceptions raised by the study services."""


class AiduError(Exception):
    """Base class for application errors."""


class NotFoundError(AiduError, ValueError):
    """A grade, unit, grammar point or set does not exist or has no content."""


class SessionInProgressError(AiduError, RuntimeError):
    """A session for the same unit is already being started."""


class QuestionFormatError(AiduError, ValueError):
    """A generated question payload does not match the expected shape."""
