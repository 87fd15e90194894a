"""Type text for the two places a parameter's type appears in the generated class."""

from enum import Enum

from paramobject.core.errors import MalformedParameterError
from paramobject.core.model import ParameterDescriptor

ARRAY_SUFFIX = "[]"
ELLIPSIS_SUFFIX = "..."


class TypeSite(Enum):
    """Where a type is written.

    DECLARATION covers constructor and setter parameters, where a variable-arity
    parameter keeps its ellipsis. STORAGE covers fields and getter return types,
    where it must be an ordinary array.
    """

    DECLARATION = ELLIPSIS_SUFFIX
    STORAGE = ARRAY_SUFFIX


def component_type_text(parameter: ParameterDescriptor) -> str:
    """Return the element type of a variable-arity parameter.

    Args:
        parameter: A parameter with var_args set

    Returns:
        The type text without its trailing '[]' or '...'

    Raises:
        MalformedParameterError: If the type text is neither an array nor an ellipsis type
    """
    type_text = parameter.type_text.rstrip()
    for suffix in (ELLIPSIS_SUFFIX, ARRAY_SUFFIX):
        if type_text.endswith(suffix):
            component = type_text[: -len(suffix)].rstrip()
            if component:
                return component
    raise MalformedParameterError(
        parameter.name, f"variable-arity type '{parameter.type_text}' is not an array type"
    )


def render_type_text(parameter: ParameterDescriptor, site: TypeSite) -> str:
    """Render a parameter's type for the given site.

    Args:
        parameter: The parameter whose type to render
        site: Declaration site (ellipsis for varargs) or storage site (array for varargs)

    Returns:
        The type as source text

    Raises:
        MalformedParameterError: If the parameter has no type text, or a
            variable-arity parameter has no component type
    """
    if not parameter.type_text or not parameter.type_text.strip():
        raise MalformedParameterError(parameter.name, "parameter has no type")
    if parameter.var_args:
        return component_type_text(parameter) + site.value
    return parameter.type_text
