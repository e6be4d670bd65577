"""
Class-constrained secure password generator package.
"""

from .config import CharClass, GenerationConfig, DEFAULT_CONFIG, PRESETS, get_preset, validate_config
from .errors import PasswordGeneratorError, InvalidConfiguration, EmptyAlphabet
from .charset import build_alphabet
from .generator import GenerationMeta, generate_password, generate_password_with_meta
from .strength import StrengthLevel, StrengthReport, character_stats, score_password

__all__ = [
    "CharClass",
    "GenerationConfig",
    "DEFAULT_CONFIG",
    "PRESETS",
    "get_preset",
    "validate_config",
    "PasswordGeneratorError",
    "InvalidConfiguration",
    "EmptyAlphabet",
    "build_alphabet",
    "GenerationMeta",
    "generate_password",
    "generate_password_with_meta",
    "StrengthLevel",
    "StrengthReport",
    "character_stats",
    "score_password",
]
