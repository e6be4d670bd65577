"""
Charset builder: derive the effective alphabet from a GenerationConfig.
"""

from __future__ import annotations

import logging
import string

from .config import CharClass, GenerationConfig

logger = logging.getLogger(__name__)


CHARSETS: dict[CharClass, str] = {
    CharClass.UPPERCASE: string.ascii_uppercase,
    CharClass.LOWERCASE: string.ascii_lowercase,
    CharClass.DIGITS: string.digits,
    CharClass.SYMBOLS: "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

# Visually confusable characters.
SIMILAR_CHARS = "0O1lI"

# Punctuation prone to display or shell-escaping ambiguity.
AMBIGUOUS_CHARS = "{}[]()/\\'\"`~,;:.<>"


def _excluded(config: GenerationConfig) -> frozenset[str]:
    excluded: set[str] = set()
    if config.exclude_similar:
        excluded.update(SIMILAR_CHARS)
    if config.exclude_ambiguous:
        excluded.update(AMBIGUOUS_CHARS)
    return frozenset(excluded)


def _filter(chars: str, excluded: frozenset[str]) -> str:
    # Plain membership test; no pattern syntax involved.
    return "".join(ch for ch in chars if ch not in excluded)


def class_pool(char_class: CharClass, config: GenerationConfig) -> str:
    """
    Characters of one class that survive the config's exclusion filters.
    """
    return _filter(CHARSETS[char_class], _excluded(config))


def build_alphabet(config: GenerationConfig) -> str:
    """
    Concatenate the enabled classes in canonical order, apply the
    exclusion filters and collapse duplicates.

    Returns an empty string when no class is enabled or when the filters
    removed everything.
    """
    raw = "".join(CHARSETS[c] for c in config.ordered_classes)
    alphabet = "".join(dict.fromkeys(_filter(raw, _excluded(config))))

    logger.debug(
        "Alphabet built: classes=%s similar=%s ambiguous=%s size=%d",
        [c.value for c in config.ordered_classes],
        config.exclude_similar,
        config.exclude_ambiguous,
        len(alphabet),
    )
    return alphabet
