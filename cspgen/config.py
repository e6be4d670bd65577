"""
Configuration for the class-constrained password generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .errors import InvalidConfiguration


# Supported password length range (inclusive).
MIN_LENGTH = 4
MAX_LENGTH = 128


class CharClass(Enum):
    """
    Character classes, declared in canonical order.
    Iterating the enum always yields Uppercase, Lowercase, Digits, Symbols.
    """

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"


@dataclass(frozen=True)
class GenerationConfig:
    # Desired password length in characters.
    length: int = 16

    # Enabled character classes.
    classes: frozenset[CharClass] = field(
        default_factory=lambda: frozenset(CharClass)
    )

    # Drop visually confusable characters (0 O 1 l I).
    exclude_similar: bool = False

    # Drop punctuation that is easy to misread or mis-escape.
    exclude_ambiguous: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of classes but always store a frozenset.
        if not isinstance(self.classes, frozenset):
            object.__setattr__(self, "classes", frozenset(self.classes))

    @classmethod
    def from_flags(
        cls,
        length: int = 16,
        uppercase: bool = True,
        lowercase: bool = True,
        digits: bool = True,
        symbols: bool = True,
        exclude_similar: bool = False,
        exclude_ambiguous: bool = False,
    ) -> "GenerationConfig":
        flags = {
            CharClass.UPPERCASE: uppercase,
            CharClass.LOWERCASE: lowercase,
            CharClass.DIGITS: digits,
            CharClass.SYMBOLS: symbols,
        }
        return cls(
            length=length,
            classes=frozenset(c for c, on in flags.items() if on),
            exclude_similar=exclude_similar,
            exclude_ambiguous=exclude_ambiguous,
        )

    @property
    def ordered_classes(self) -> list[CharClass]:
        """Enabled classes in canonical order."""
        return [c for c in CharClass if c in self.classes]

    def has(self, char_class: CharClass) -> bool:
        return char_class in self.classes

    def with_changes(self, **changes) -> "GenerationConfig":
        return replace(self, **changes)


def validate_config(config: GenerationConfig) -> GenerationConfig:
    """
    Check a configuration before generation.

    Raises InvalidConfiguration when no class is enabled or the length
    is not an integer inside [MIN_LENGTH, MAX_LENGTH]. Returns the
    config unchanged so calls can be chained.
    """
    if not config.classes:
        raise InvalidConfiguration("Select at least one character class.")

    length = config.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidConfiguration(f"Length must be an integer, got {length!r}.")
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidConfiguration(
            f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}."
        )
    return config


# Named presets offered by the front ends.
PRESETS: dict[str, GenerationConfig] = {
    "strong": GenerationConfig.from_flags(length=16),
    "medium": GenerationConfig.from_flags(length=12, symbols=False),
    "pin": GenerationConfig.from_flags(
        length=6, uppercase=False, lowercase=False, symbols=False
    ),
    "letters": GenerationConfig.from_flags(length=16, digits=False, symbols=False),
    "numbers": GenerationConfig.from_flags(
        length=16, uppercase=False, lowercase=False, symbols=False
    ),
}


def get_preset(name: str) -> GenerationConfig:
    try:
        return PRESETS[name.lower()]
    except KeyError:
        known = ", ".join(PRESETS)
        raise InvalidConfiguration(
            f"Unknown preset {name!r} (choose from: {known})."
        ) from None


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PRESETS["strong"]
