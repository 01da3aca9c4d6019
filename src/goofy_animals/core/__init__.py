"""Core components: word store and name generation."""

from .exceptions import (
    EmptyAnimalsError,
    GoofyAnimalsError,
    NotEnoughAdjectivesError,
    TrailingNewlineError,
    WordListError,
)
from .word_store import GoofyAnimals, RandomSource, validate_word_lists
from .name_generator import (
    ADJECTIVES,
    ANIMALS,
    DEFAULT_GOOFY_ANIMALS,
    generate_name,
    generate_name_parts,
    load_word_list,
)

__all__ = [
    # Word Store
    "GoofyAnimals",
    "RandomSource",
    "validate_word_lists",
    # Name Generator
    "ADJECTIVES",
    "ANIMALS",
    "DEFAULT_GOOFY_ANIMALS",
    "generate_name",
    "generate_name_parts",
    "load_word_list",
    # Exceptions
    "GoofyAnimalsError",
    "WordListError",
    "EmptyAnimalsError",
    "NotEnoughAdjectivesError",
    "TrailingNewlineError",
]
