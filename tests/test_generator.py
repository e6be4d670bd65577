import math
import string
from collections import Counter

import pytest

from cspgen import charset
from cspgen.charset import SIMILAR_CHARS, class_pool
from cspgen.config import CharClass, GenerationConfig
from cspgen.entropy import SecureRandom, choice, shuffle
from cspgen.errors import EmptyAlphabet, PasswordGeneratorError
from cspgen.generator import generate_password, generate_password_with_meta


def _classes_present(password, config):
    return {
        c for c in config.classes
        if any(ch in charset.CHARSETS[c] for ch in password)
    }


def test_default_generation_length_and_coverage():
    meta = generate_password_with_meta()
    assert len(meta.password) == 16
    assert _classes_present(meta.password, meta.config) == set(CharClass)
    assert not meta.truncated


@pytest.mark.parametrize("length", [4, 5, 8, 32, 128])
def test_every_enabled_class_is_covered(class_set, length):
    config = GenerationConfig(length=length, classes=class_set)
    for _ in range(25):
        password = generate_password(config)
        assert len(password) == length
        assert _classes_present(password, config) == set(class_set)


def test_length_equal_to_class_count_uses_one_of_each():
    config = GenerationConfig(length=4)
    for _ in range(50):
        password = generate_password(config)
        assert _classes_present(password, config) == set(CharClass)


def test_short_length_truncates_required_characters():
    config = GenerationConfig(length=2)
    meta = generate_password_with_meta(config)

    assert meta.truncated
    assert len(meta.password) == 2
    assert meta.covered_classes == [CharClass.UPPERCASE, CharClass.LOWERCASE]
    assert sum(c in string.ascii_uppercase for c in meta.password) == 1
    assert sum(c in string.ascii_lowercase for c in meta.password) == 1


def test_zero_length_yields_empty_password():
    meta = generate_password_with_meta(GenerationConfig(length=0))
    assert meta.password == ""
    assert meta.truncated


def test_output_is_anagram_of_pre_shuffle_sequence(seeded_rng):
    meta = generate_password_with_meta(GenerationConfig(length=40), seeded_rng)
    assert sorted(meta.password) == sorted(meta.pre_shuffle)
    assert meta.pre_shuffle[: len(meta.required_chars)] == meta.required_chars


def test_required_chars_follow_class_order(seeded_rng):
    config = GenerationConfig(length=10)
    meta = generate_password_with_meta(config, seeded_rng)
    for ch, char_class in zip(meta.required_chars, meta.covered_classes):
        assert ch in class_pool(char_class, config)
    assert meta.covered_classes == list(CharClass)


def test_injected_rng_is_deterministic(make_rng):
    config = GenerationConfig(length=24)
    first = generate_password(config, make_rng(7))
    second = generate_password(config, make_rng(7))
    assert first == second


def test_exclusions_are_respected_everywhere():
    config = GenerationConfig(length=128, exclude_similar=True, exclude_ambiguous=True)
    allowed = set(charset.build_alphabet(config))
    for _ in range(20):
        password = generate_password(config)
        assert set(password) <= allowed
        assert not set(password) & set(SIMILAR_CHARS)


def test_no_classes_fails_with_empty_alphabet():
    with pytest.raises(EmptyAlphabet):
        generate_password(GenerationConfig(classes=frozenset()))


def test_empty_alphabet_is_a_generator_error():
    with pytest.raises(PasswordGeneratorError):
        generate_password(GenerationConfig(classes=frozenset()))


def test_exclusions_emptying_everything_fail(monkeypatch):
    monkeypatch.setitem(charset.CHARSETS, CharClass.DIGITS, "01lI")
    config = GenerationConfig(classes=[CharClass.DIGITS], exclude_similar=True)
    with pytest.raises(EmptyAlphabet):
        generate_password(config)


def test_class_emptied_by_exclusions_is_skipped(monkeypatch):
    monkeypatch.setitem(charset.CHARSETS, CharClass.DIGITS, "01")
    config = GenerationConfig(
        length=12,
        classes=[CharClass.DIGITS, CharClass.LOWERCASE],
        exclude_similar=True,
    )
    meta = generate_password_with_meta(config)
    assert len(meta.password) == 12
    assert meta.covered_classes == [CharClass.LOWERCASE]
    assert not set(meta.password) & set("01l")


def test_entropy_estimate():
    meta = generate_password_with_meta(GenerationConfig(length=16))
    assert meta.entropy_bits == pytest.approx(16 * math.log2(88))


def test_shuffle_produces_every_permutation_evenly():
    rng = SecureRandom()
    counts = Counter()
    for _ in range(6000):
        items = ["a", "b", "c"]
        shuffle(rng, items)
        counts["".join(items)] += 1

    assert len(counts) == 6
    for n in counts.values():
        assert 800 < n < 1200


def test_choice_rejects_empty_sequence():
    with pytest.raises(IndexError):
        choice(SecureRandom(), "")


def test_randbelow_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        SecureRandom().randbelow(0)


def test_secure_random_helpers():
    rng = SecureRandom()
    assert rng.choice("xyz") in "xyz"
    items = list(range(10))
    rng.shuffle(items)
    assert sorted(items) == list(range(10))
