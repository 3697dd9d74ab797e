"""Errors raised by the progression engine.

Every error is raised before a new profile is built, so a rejected
transition never leaves partial state behind.  Callers surface these as
plain user feedback; none of them is fatal.
"""


class ProgressionError(Exception):
    """Base class for rejected engine operations."""


class UnknownActivity(ProgressionError):
    """The activity identifier is neither built-in nor custom."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown activity: {identifier!r}")
        self.identifier = identifier


class DuplicateActivity(ProgressionError):
    """A custom activity would shadow an existing identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Activity already exists: {identifier!r}")
        self.identifier = identifier


class InvalidDuration(ProgressionError):
    """Logged duration is not a positive whole number of minutes."""

    def __init__(self, duration: object) -> None:
        super().__init__(f"Duration must be a positive number of minutes, got {duration!r}")
        self.duration = duration


class InvalidActivity(ProgressionError):
    """A custom activity definition is malformed."""
