"""
Error types raised by the password generator.
"""


class PasswordGeneratorError(ValueError):
    """Generic generator error."""


class InvalidConfiguration(PasswordGeneratorError):
    """The configuration cannot be used for generation (no class, bad length...)."""


class EmptyAlphabet(PasswordGeneratorError):
    """Class selection plus exclusion filters left no characters to draw from."""
