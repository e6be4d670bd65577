import dataclasses

import pytest

from cspgen.config import (
    CharClass,
    DEFAULT_CONFIG,
    GenerationConfig,
    MAX_LENGTH,
    MIN_LENGTH,
    PRESETS,
    get_preset,
    validate_config,
)
from cspgen.errors import InvalidConfiguration


def test_default_config_enables_everything():
    assert DEFAULT_CONFIG.length == 16
    assert DEFAULT_CONFIG.classes == frozenset(CharClass)
    assert not DEFAULT_CONFIG.exclude_similar
    assert not DEFAULT_CONFIG.exclude_ambiguous


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.length = 4


def test_classes_are_normalised_to_frozenset():
    config = GenerationConfig(classes=[CharClass.SYMBOLS, CharClass.DIGITS])
    assert isinstance(config.classes, frozenset)
    assert config.ordered_classes == [CharClass.DIGITS, CharClass.SYMBOLS]


def test_from_flags():
    config = GenerationConfig.from_flags(length=10, uppercase=False, symbols=False, exclude_similar=True)
    assert config.length == 10
    assert config.classes == {CharClass.LOWERCASE, CharClass.DIGITS}
    assert config.exclude_similar
    assert not config.exclude_ambiguous


def test_with_changes_returns_copy():
    changed = DEFAULT_CONFIG.with_changes(length=32)
    assert changed.length == 32
    assert DEFAULT_CONFIG.length == 16


@pytest.mark.parametrize("length", [MIN_LENGTH, 20, MAX_LENGTH])
def test_validate_accepts_supported_lengths(length):
    config = GenerationConfig(length=length)
    assert validate_config(config) is config


@pytest.mark.parametrize("length", [MIN_LENGTH - 1, MAX_LENGTH + 1, -5, "16", 12.0, True])
def test_validate_rejects_bad_lengths(length):
    with pytest.raises(InvalidConfiguration):
        validate_config(GenerationConfig(length=length))


def test_validate_rejects_no_classes():
    with pytest.raises(InvalidConfiguration, match="at least one"):
        validate_config(GenerationConfig(classes=frozenset()))


def test_invalid_configuration_is_value_error():
    assert issubclass(InvalidConfiguration, ValueError)


@pytest.mark.parametrize(
    "name, length, classes",
    [
        ("strong", 16, set(CharClass)),
        ("medium", 12, {CharClass.UPPERCASE, CharClass.LOWERCASE, CharClass.DIGITS}),
        ("pin", 6, {CharClass.DIGITS}),
        ("letters", 16, {CharClass.UPPERCASE, CharClass.LOWERCASE}),
        ("numbers", 16, {CharClass.DIGITS}),
    ],
)
def test_presets(name, length, classes):
    preset = get_preset(name)
    assert preset.length == length
    assert preset.classes == classes
    assert not preset.exclude_similar
    assert not preset.exclude_ambiguous
    validate_config(preset)


def test_preset_lookup_is_case_insensitive():
    assert get_preset("PIN") is PRESETS["pin"]


def test_unknown_preset():
    with pytest.raises(InvalidConfiguration, match="Unknown preset"):
        get_preset("ultra")
