"""Word store holding the adjective and animal lists used to build names."""

import logging
from dataclasses import InitVar, dataclass
from typing import Protocol, Sequence

from .exceptions import (
    EmptyAnimalsError,
    NotEnoughAdjectivesError,
    TrailingNewlineError,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that draws a uniform integer from ``[0, n)``.

    ``random.Random``, ``random.SystemRandom`` and the ``random`` module
    itself all qualify.
    """

    def randrange(self, stop: int) -> int: ...


def validate_word_lists(animals: Sequence[str], adjectives: Sequence[str]) -> None:
    """Check that the lists can always produce a name.

    Args:
        animals: Animal names
        adjectives: Adjectives

    Raises:
        EmptyAnimalsError: No animals at all
        NotEnoughAdjectivesError: Fewer than two adjectives
        TrailingNewlineError: Either list ends with an empty string
    """
    if len(animals) < 1:
        raise EmptyAnimalsError("empty animals")

    if len(adjectives) < 2:
        raise NotEnoughAdjectivesError("must have at least two adjectives")

    if animals[-1] == "":
        raise TrailingNewlineError("trailing newline in animals")

    if adjectives[-1] == "":
        raise TrailingNewlineError("trailing newline in adjectives")


@dataclass(frozen=True, repr=False)
class GoofyAnimals:
    """Immutable pair of word lists for ``adjective-adjective-animal`` names.

    Both lists are stored as tuples and handed out as-is by the
    ``animals`` and ``adjectives`` attributes. Construction validates them;
    use :meth:`new_unchecked` to skip that.
    """

    animals: tuple[str, ...]
    adjectives: tuple[str, ...]
    validate: InitVar[bool] = True

    def __post_init__(self, validate: bool) -> None:
        object.__setattr__(self, "animals", tuple(self.animals))
        object.__setattr__(self, "adjectives", tuple(self.adjectives))

        if validate:
            validate_word_lists(self.animals, self.adjectives)

    @classmethod
    def new_unchecked(
        cls, animals: Sequence[str], adjectives: Sequence[str]
    ) -> "GoofyAnimals":
        """Create an instance without validating the lists.

        With an empty list, drawing a name raises from the random source.
        With a single adjective, drawing a name never returns.
        """
        return cls(animals, adjectives, validate=False)

    def __repr__(self) -> str:
        return (
            f"GoofyAnimals(total_adjectives={len(self.adjectives)}, "
            f"total_animals={len(self.animals)})"
        )

    def generate_name_parts(self, rng: RandomSource) -> tuple[str, str, str]:
        """Pick two different adjectives and one animal.

        Args:
            rng: Random source used for every draw

        Returns:
            Tuple of (adjective, adjective, animal), in draw order
        """
        total_adjectives = len(self.adjectives)

        # Redraw the pair until the indices differ
        while True:
            adjective_one = rng.randrange(total_adjectives)
            adjective_two = rng.randrange(total_adjectives)
            if adjective_one != adjective_two:
                break

        animal = rng.randrange(len(self.animals))

        logger.debug(
            f"generated name: adjective_one={adjective_one} "
            f"adjective_two={adjective_two} animal={animal}",
            extra={
                "adjective_one": adjective_one,
                "adjective_two": adjective_two,
                "animal": animal,
            },
        )

        return (
            self.adjectives[adjective_one],
            self.adjectives[adjective_two],
            self.animals[animal],
        )

    def generate_name(self, rng: RandomSource) -> str:
        """Generate a name in the format ``adjective-adjective-animal``.

        Example: "healthy-frivolous-dove"
        """
        return "-".join(self.generate_name_parts(rng))
