"""goofy-animals: random ``adjective-adjective-animal`` names."""

from .core import (
    ADJECTIVES,
    ANIMALS,
    DEFAULT_GOOFY_ANIMALS,
    EmptyAnimalsError,
    GoofyAnimals,
    GoofyAnimalsError,
    NotEnoughAdjectivesError,
    RandomSource,
    TrailingNewlineError,
    WordListError,
    generate_name,
    generate_name_parts,
    load_word_list,
    validate_word_lists,
)

__version__ = "0.1.0"

__all__ = [
    "ADJECTIVES",
    "ANIMALS",
    "DEFAULT_GOOFY_ANIMALS",
    "GoofyAnimals",
    "RandomSource",
    "generate_name",
    "generate_name_parts",
    "load_word_list",
    "validate_word_lists",
    "GoofyAnimalsError",
    "WordListError",
    "EmptyAnimalsError",
    "NotEnoughAdjectivesError",
    "TrailingNewlineError",
]
