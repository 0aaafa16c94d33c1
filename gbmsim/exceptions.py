"""Exceptions raised by the path simulator."""

from typing import Any


class InvalidParameterError(ValueError):
    """A simulation parameter is outside its allowed range.

    Parameters
    ----------
    parameter : str
        Name of the offending parameter
    value : Any
        Value that was supplied
    constraint : str
        Human-readable description of the allowed range
    """

    def __init__(self, parameter: str, value: Any, constraint: str):
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(f"{parameter} must be {constraint}, got {value!r}")
