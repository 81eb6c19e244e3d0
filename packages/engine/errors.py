"""
Exception hierarchy for the assistant.

  - DataSourceError      : the dictionary could not be loaded or is unusable.
                           Fatal at startup; the engine cannot be built.
  - InvalidFeedbackError : a caller passed a malformed feedback round to
                           `update`. The engine state is left untouched.

An empty candidate set is NOT an error; `update` simply returns 0.
"""


class WordleAssistError(Exception):
    """Base class for every error raised by this package."""


class DataSourceError(WordleAssistError):
    """Missing, empty, unreadable or malformed dictionary source."""


class InvalidFeedbackError(WordleAssistError, ValueError):
    """Guess/feedback pair that does not match the engine's word length or alphabet."""
