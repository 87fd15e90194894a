"""Rendering engine for generated parameter object classes."""

from paramobject.core.builder import ParameterObjectBuilder
from paramobject.core.errors import (
    ConfigurationError,
    MalformedParameterError,
    ParameterObjectError,
)
from paramobject.core.model import AnnotationDescriptor, ParameterDescriptor, ParameterSpec
from paramobject.core.style import StyleConfiguration
from paramobject.core.type_text import TypeSite, render_type_text

__all__ = [
    "AnnotationDescriptor",
    "ConfigurationError",
    "MalformedParameterError",
    "ParameterDescriptor",
    "ParameterObjectBuilder",
    "ParameterObjectError",
    "ParameterSpec",
    "StyleConfiguration",
    "TypeSite",
    "render_type_text",
]
