"""Exceptions raised while generating a parameter object class."""

from typing import Optional


class ParameterObjectError(ValueError):
    """Base class for all parameter object generation failures."""


class ConfigurationError(ParameterObjectError):
    """The builder or descriptor is missing required configuration or has an invalid value."""


class MalformedParameterError(ParameterObjectError):
    """A parameter description cannot yield a usable name or type."""

    def __init__(self, parameter_name: Optional[str], reason: str) -> None:
        """Initialize the error.

        Args:
            parameter_name: Name of the offending parameter, if it has one
            reason: What is wrong with the parameter
        """
        self.parameter_name = parameter_name
        self.reason = reason
        label = f"'{parameter_name}'" if parameter_name else "<unnamed>"
        super().__init__(f"Malformed parameter {label}: {reason}")
