from __future__ import annotations


class Connect5Error(Exception):
    """Base class for engine errors."""


class IllegalPlacement(Connect5Error, ValueError):
    """The requested column has no open drop target (or does not exist)."""


class ConfigurationMisuse(Connect5Error, RuntimeError):
    """
    Session contract broken by the caller: sides configured twice without a
    reset, or a placement requested before the sides were configured.
    """
