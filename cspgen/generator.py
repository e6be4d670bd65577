"""
Password generator: constrained random generation with guaranteed class
coverage and an unbiased final shuffle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .charset import build_alphabet, class_pool
from .config import CharClass, GenerationConfig, DEFAULT_CONFIG
from .entropy import DEFAULT_RANDOM, RandomSource, alphabet_entropy_bits, choice, shuffle
from .errors import EmptyAlphabet

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Filtered alphabet the bulk characters were drawn from
    alphabet: str

    # One character per enabled class, in canonical class order
    # (already cut down to `length` when the length is too short)
    required_chars: list[str]

    # Required + bulk characters before the shuffle
    pre_shuffle: list[str]

    # Classes that had a non-empty pool and contributed a required character
    covered_classes: list[CharClass]

    # True when length < number of enabled classes
    truncated: bool

    # Theoretical entropy estimate (length * log2(alphabet size))
    entropy_bits: float
    config: GenerationConfig


def _required_chars(
    config: GenerationConfig, rng: RandomSource
) -> tuple[list[str], list[CharClass]]:
    chars: list[str] = []
    covered: list[CharClass] = []
    for char_class in config.ordered_classes:
        pool = class_pool(char_class, config)
        if not pool:
            logger.warning(
                "Exclusion filters emptied the %s class; it cannot be guaranteed.",
                char_class.value,
            )
            continue
        chars.append(choice(rng, pool))
        covered.append(char_class)
    return chars, covered


def generate_password_with_meta(
    config: GenerationConfig | None = None,
    rng: RandomSource | None = None,
) -> GenerationMeta:
    """
    Generation pipeline with metadata:

    - Build the filtered alphabet; fail with EmptyAlphabet if nothing is left.
    - Draw one character from every enabled class.
    - Fill the remaining length with draws from the whole alphabet.
    - Fisher-Yates shuffle the lot so coverage characters land anywhere.
    """
    cfg = config or DEFAULT_CONFIG
    source = rng or DEFAULT_RANDOM

    alphabet = build_alphabet(cfg)
    if not alphabet:
        raise EmptyAlphabet(
            "No characters available: enable a character class or relax the exclusions."
        )

    length = max(0, cfg.length)
    required, covered = _required_chars(cfg, source)

    remaining = length - len(required)
    truncated = remaining < 0
    if truncated:
        # Too short to hold one of each class: keep the first `length`.
        logger.info(
            "Length %d is shorter than %d enabled classes; coverage is partial.",
            length,
            len(required),
        )
        required = required[:length]
        covered = covered[:length]
        remaining = 0

    chars = required + [choice(source, alphabet) for _ in range(remaining)]
    pre_shuffle = chars[:]
    shuffle(source, chars)
    password = "".join(chars)

    logger.debug(
        "Generated password: length=%d alphabet=%d required=%d",
        len(password),
        len(alphabet),
        len(required),
    )

    return GenerationMeta(
        password=password,
        alphabet=alphabet,
        required_chars=required,
        pre_shuffle=pre_shuffle,
        covered_classes=covered,
        truncated=truncated,
        entropy_bits=alphabet_entropy_bits(len(password), len(alphabet)),
        config=cfg,
    )


def generate_password(
    config: GenerationConfig | None = None,
    rng: RandomSource | None = None,
) -> str:
    """
    Return only the password string. Raises EmptyAlphabet when the
    config leaves nothing to draw from.
    """
    return generate_password_with_meta(config, rng).password
