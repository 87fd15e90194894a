"""Load parameter object descriptors written by the refactoring front end.

A descriptor is a JSON document holding the resolved snapshot of every
extracted parameter plus the code style to render with:

    {
        "package": "geometry",
        "type_parameters": ["T"],
        "style": {"field_name_prefix": "m_"},
        "parameters": [
            {"name": "x", "type": "int", "setter": false},
            {"name": "tags", "type": "String...", "var_args": true, "setter": true}
        ]
    }
"""

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional

from paramobject.core.errors import ConfigurationError, MalformedParameterError
from paramobject.core.model import AnnotationDescriptor, ParameterDescriptor, ParameterSpec
from paramobject.core.style import StyleConfiguration

logger = logging.getLogger(__name__)

STYLE_KEYS = frozenset(f.name for f in fields(StyleConfiguration))


@dataclass
class ParameterObjectDescriptor:
    """Everything needed to render one parameter object class, apart from its name."""

    package: str = ""
    type_parameters: list[str] = field(default_factory=list)
    style: StyleConfiguration = field(default_factory=StyleConfiguration)
    specs: list[ParameterSpec] = field(default_factory=list)


def load_style(data: Optional[Mapping[str, Any]]) -> StyleConfiguration:
    """Build a style configuration from the descriptor's 'style' section.

    Args:
        data: Mapping of StyleConfiguration field names to values, or None for defaults

    Returns:
        The style configuration

    Raises:
        ConfigurationError: If the section has unknown keys or values of the wrong type
    """
    if data is None:
        return StyleConfiguration()
    if not isinstance(data, Mapping):
        raise ConfigurationError("'style' must be an object")
    unknown = sorted(set(data) - STYLE_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown style settings: {', '.join(unknown)}")
    for key, value in data.items():
        expected = bool if key == "generate_final_parameters" else str
        if not isinstance(value, expected):
            raise ConfigurationError(f"Style setting '{key}' must be a {expected.__name__}")
    return StyleConfiguration(**data)


def _optional_str(value: Any) -> bool:
    return value is None or isinstance(value, str)


def _string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def load_annotation(data: Mapping[str, Any], parameter_name: str) -> AnnotationDescriptor:
    """Build an annotation record; a null 'name' marks an unresolved annotation.

    Args:
        data: Annotation entry with 'name' and optional 'arguments'
        parameter_name: Name of the parameter carrying the annotation, for error messages

    Raises:
        MalformedParameterError: If the entry is not an object or its values are not strings
    """
    if not isinstance(data, Mapping):
        raise MalformedParameterError(parameter_name, "annotation entry must be an object")
    qualified_name = data.get("name")
    arguments = data.get("arguments")
    if not _optional_str(qualified_name) or not _optional_str(arguments):
        raise MalformedParameterError(
            parameter_name, "annotation 'name' and 'arguments' must be strings or null"
        )
    return AnnotationDescriptor(qualified_name=qualified_name, argument_text=arguments or "")


def load_parameter(data: Mapping[str, Any]) -> ParameterSpec:
    """Build a field spec from one entry of the 'parameters' list.

    Args:
        data: Parameter entry with at least 'name' and 'type'

    Returns:
        The spec, with setter_required taken from 'setter' (default False)

    Raises:
        MalformedParameterError: If the entry has no name or no type, or a value has the wrong type
    """
    if not isinstance(data, Mapping):
        raise MalformedParameterError(None, "parameter entry must be an object")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedParameterError(None, "parameter entry has no 'name'")
    type_text = data.get("type")
    if not isinstance(type_text, str) or not type_text:
        raise MalformedParameterError(name, "parameter entry has no 'type'")

    for key in ("var_args", "setter"):
        if not isinstance(data.get(key, False), bool):
            raise MalformedParameterError(name, f"'{key}' must be true or false")
    modifiers = data.get("modifiers", [])
    if not _string_list(modifiers):
        raise MalformedParameterError(name, "'modifiers' must be a list of strings")
    annotations = data.get("annotations", [])
    if not isinstance(annotations, list):
        raise MalformedParameterError(name, "'annotations' must be a list")
    doc_comment = data.get("doc")
    if not _optional_str(doc_comment):
        raise MalformedParameterError(name, "'doc' must be a string or null")

    parameter = ParameterDescriptor(
        name=name,
        type_text=type_text,
        var_args=data.get("var_args", False),
        modifiers=frozenset(modifiers),
        annotations=tuple(load_annotation(entry, name) for entry in annotations),
        doc_comment=doc_comment,
    )
    return ParameterSpec(parameter, data.get("setter", False))


def parse_descriptor(text: str, source: str = "<string>") -> ParameterObjectDescriptor:
    """Parse a descriptor from JSON text.

    Args:
        text: JSON document
        source: Where the text came from, used in error messages

    Returns:
        The parsed descriptor

    Raises:
        ConfigurationError: If the text is not a JSON object or a top-level value has the wrong type
        MalformedParameterError: If a parameter entry is malformed
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid descriptor {source}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid descriptor {source}: expected a JSON object")

    package = data.get("package")
    if not _optional_str(package):
        raise ConfigurationError(f"Invalid descriptor {source}: 'package' must be a string")
    type_parameters = data.get("type_parameters", [])
    if not _string_list(type_parameters):
        raise ConfigurationError(
            f"Invalid descriptor {source}: 'type_parameters' must be a list of strings"
        )
    parameters = data.get("parameters", [])
    if not isinstance(parameters, list):
        raise ConfigurationError(f"Invalid descriptor {source}: 'parameters' must be a list")

    descriptor = ParameterObjectDescriptor(
        package=package or "",
        type_parameters=type_parameters,
        style=load_style(data.get("style")),
        specs=[load_parameter(entry) for entry in parameters],
    )
    logger.debug("Loaded %d parameter(s) from %s", len(descriptor.specs), source)
    return descriptor


def load_descriptor(path: Path) -> ParameterObjectDescriptor:
    """Read and parse a descriptor file.

    Raises:
        ConfigurationError: If the file does not exist or cannot be parsed
    """
    if not path.is_file():
        raise ConfigurationError(f"Descriptor file does not exist: {path}")
    return parse_descriptor(path.read_text(encoding="utf-8"), source=str(path))
