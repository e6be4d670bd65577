"""
Randomness source and entropy estimate.

Every character that ends up in a password is drawn through SecureRandom,
which sits on top of the operating system CSPRNG via `secrets`.
"""

from __future__ import annotations

import math
import secrets
from typing import MutableSequence, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int: ...


class SecureRandom:
    """
    Thin wrapper over `secrets` exposing the few draws the generator needs.

    `secrets.randbelow` rejection-samples, so index selection has no
    modulo bias for any alphabet size. Stateless, safe to share between
    threads.
    """

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        return secrets.randbelow(n)

    def choice(self, seq: Sequence[T]) -> T:
        return choice(self, seq)

    def shuffle(self, items: MutableSequence[T]) -> None:
        shuffle(self, items)


def choice(rng: RandomSource, seq: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    if not seq:
        raise IndexError("Cannot choose from an empty sequence")
    return seq[rng.randbelow(len(seq))]


def shuffle(rng: RandomSource, items: MutableSequence[T]) -> None:
    """
    In-place Fisher-Yates shuffle.

    Walk from the end, swapping each slot with a uniformly chosen slot at
    or before it; every permutation comes out equally likely as long as
    `rng.randbelow` is uniform.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]


def alphabet_entropy_bits(length: int, alphabet_size: int) -> float:
    """
    Theoretical entropy of a password drawn uniformly from the alphabet.
    """
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)


DEFAULT_RANDOM = SecureRandom()
