"""Random memorable name generator backed by the bundled word lists."""

import random
from importlib import resources
from typing import Optional

from .word_store import GoofyAnimals, RandomSource

ANIMALS_FILE = "en_animals.txt"
ADJECTIVES_FILE = "en_adjectives.txt"


def load_word_list(filename: str) -> tuple[str, ...]:
    """Load a bundled word list, one word per line.

    The text is split on every newline, so a file ending in a newline
    yields a trailing empty entry that the word store rejects.
    """
    data_file = resources.files("goofy_animals") / "data" / filename
    text = data_file.read_text(encoding="utf-8")
    return tuple(text.split("\n"))


ANIMALS = load_word_list(ANIMALS_FILE)
ADJECTIVES = load_word_list(ADJECTIVES_FILE)

# Built at import so a broken bundled list fails before any name is drawn
DEFAULT_GOOFY_ANIMALS = GoofyAnimals(ANIMALS, ADJECTIVES)


def generate_name_parts(rng: Optional[RandomSource] = None) -> tuple[str, str, str]:
    """Generate (adjective, adjective, animal) from the default word lists.

    Args:
        rng: Random source (default: the ``random`` module)

    Returns:
        Tuple of two different adjectives and an animal
    """
    return DEFAULT_GOOFY_ANIMALS.generate_name_parts(rng if rng is not None else random)


def generate_name(rng: Optional[RandomSource] = None) -> str:
    """Generate a random memorable name from the default word lists.

    Returns:
        A name in the format: {adjective}-{adjective}-{animal}
        Example: "healthy-frivolous-dove"
    """
    return DEFAULT_GOOFY_ANIMALS.generate_name(rng if rng is not None else random)
