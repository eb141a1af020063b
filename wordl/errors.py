"""
Error taxonomy for the assistant core.

The core never recovers from these internally; callers (CLI, harness) decide
what to do: re-prompt, revise a round, or record the game as failed.
"""


class WordlError(Exception):
    """Base class for everything the core raises on purpose."""


class MalformedRecord(WordlError, ValueError):
    """A guess record or candidate word has the wrong shape."""


class ContradictoryFeedback(MalformedRecord):
    """Feedback across rounds cannot come from a single solution word."""


class ExhaustedCandidates(WordlError):
    """No word in the dictionary satisfies the accumulated constraints."""

    def __init__(self, message: str = "no candidates left: feedback is contradictory "
                                      "or the solution is not in the dictionary"):
        super().__init__(message)
