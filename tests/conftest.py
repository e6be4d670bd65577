import itertools
import logging
import random

import pytest

from cspgen.config import CharClass, GenerationConfig


class SeededRandom:
    """Deterministic stand-in for SecureRandom."""

    def __init__(self, seed: int = 0) -> None:
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


@pytest.fixture
def seeded_rng():
    return SeededRandom(1234)


def class_combinations():
    """Every non-empty subset of character classes."""
    classes = list(CharClass)
    for size in range(1, len(classes) + 1):
        yield from (frozenset(c) for c in itertools.combinations(classes, size))


@pytest.fixture(params=list(class_combinations()), ids=lambda s: "+".join(sorted(c.value for c in s)))
def class_set(request):
    return request.param


@pytest.fixture
def full_config():
    return GenerationConfig(length=16)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_rng():
    return SeededRandom
