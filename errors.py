# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Any configuration or input error; fatal to the current setup or message."""


class AlphabetError(EnigmaError):
    pass


class PermutationError(EnigmaError):
    pass


class RotorError(EnigmaError):
    pass


class ConfigurationError(EnigmaError):
    pass


class MessageError(EnigmaError):
    pass
