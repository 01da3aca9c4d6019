"""Custom exceptions for goofy-animals."""


class GoofyAnimalsError(Exception):
    """Base exception for goofy-animals."""

    pass


class WordListError(GoofyAnimalsError):
    """Word lists violate the invariants needed for name generation."""

    pass


class EmptyAnimalsError(WordListError):
    """The animal list has no entries."""

    pass


class NotEnoughAdjectivesError(WordListError):
    """Fewer than two adjectives, so two distinct ones cannot be chosen."""

    pass


class TrailingNewlineError(WordListError):
    """A word list ends with an empty entry (a stray trailing newline)."""

    pass
