"""Naming conventions applied to generated fields and parameters.

Every identifier in the generated class is derived from the parameter's base
name: the original name with the parameter naming convention removed. Fields,
constructor parameters and accessors each re-apply their own convention to
that base name, so a field and its accessors always agree on the name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleConfiguration:
    """Code style settings shared by every field of one generated class.

    Attributes:
        field_name_prefix: Prefix for instance field names (e.g. 'm_')
        field_name_suffix: Suffix for instance field names
        static_field_name_prefix: Prefix for fields backing a static parameter (e.g. 's_')
        static_field_name_suffix: Suffix for fields backing a static parameter
        parameter_name_prefix: Prefix for constructor and setter parameter names
        parameter_name_suffix: Suffix for constructor and setter parameter names
        generate_final_parameters: Declare constructor and setter parameters final
    """

    field_name_prefix: str = ""
    field_name_suffix: str = ""
    static_field_name_prefix: str = ""
    static_field_name_suffix: str = ""
    parameter_name_prefix: str = ""
    parameter_name_suffix: str = ""
    generate_final_parameters: bool = False


def strip_parameter_name(name: str, style: StyleConfiguration) -> str:
    """Remove the parameter naming convention from a parameter name.

    The prefix is stripped first. The suffix check then runs against the
    prefix-stripped name, so a short name that matches both is never cut twice
    from the same characters.

    Args:
        name: Original parameter name (e.g. 'pCount')
        style: Style holding the parameter prefix and suffix

    Returns:
        The base name (e.g. 'Count' for prefix 'p'), or the name unchanged when
        neither prefix nor suffix matches

    Examples:
        >>> style = StyleConfiguration(parameter_name_prefix="a", parameter_name_suffix="_")
        >>> strip_parameter_name("aWidth_", style)
        'Width'
    """
    prefix = style.parameter_name_prefix
    suffix = style.parameter_name_suffix
    if prefix and name.startswith(prefix):
        name = name[len(prefix) :]
    if suffix and name.endswith(suffix):
        name = name[: len(name) - len(suffix)]
    return name


def field_name(base_name: str, style: StyleConfiguration, is_static: bool = False) -> str:
    """Apply the instance or static field naming convention to a base name."""
    if is_static:
        return style.static_field_name_prefix + base_name + style.static_field_name_suffix
    return style.field_name_prefix + base_name + style.field_name_suffix


def parameter_name(base_name: str, style: StyleConfiguration) -> str:
    """Apply the parameter naming convention to a base name."""
    return style.parameter_name_prefix + base_name + style.parameter_name_suffix


def capitalize(name: str) -> str:
    """Upper-case the first character only ('firstName' -> 'FirstName')."""
    if not name:
        return name
    return name[0].upper() + name[1:]
