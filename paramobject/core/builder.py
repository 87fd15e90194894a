"""Builder that renders the source text of a parameter object class."""

import logging
import re
from typing import Iterable, Optional, cast

from paramobject.core.errors import ConfigurationError, MalformedParameterError
from paramobject.core.model import ParameterDescriptor, ParameterSpec
from paramobject.core.style import (
    StyleConfiguration,
    capitalize,
    field_name,
    parameter_name,
    strip_parameter_name,
)
from paramobject.core.type_text import TypeSite, render_type_text

logger = logging.getLogger(__name__)

JAVA_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
JAVA_PACKAGE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*(\.[A-Za-z_$][A-Za-z0-9_$]*)*")
BOOLEAN_TYPE = "boolean"
INDENT = "\t"


class _FieldRendering:
    """Every piece of text derived from one spec, resolved once per render."""

    def __init__(self, spec: ParameterSpec, style: StyleConfiguration) -> None:
        parameter = spec.parameter
        if not parameter.name:
            raise MalformedParameterError(parameter.name, "parameter has no name")
        base_name = strip_parameter_name(parameter.name, style)
        if not base_name:
            raise MalformedParameterError(
                parameter.name, "name is empty once the parameter naming convention is removed"
            )

        self.setter_required = spec.setter_required
        self.field_name = field_name(base_name, style, parameter.is_static)
        self.parameter_name = parameter_name(base_name, style)
        self.capitalized_name = capitalize(base_name)
        self.declaration_type = render_type_text(parameter, TypeSite.DECLARATION)
        self.storage_type = render_type_text(parameter, TypeSite.STORAGE)
        self.is_boolean = parameter.type_text == BOOLEAN_TYPE
        self.annotations = _annotation_text(parameter)
        self.doc_comment = parameter.doc_comment
        self.final_parameter = "final " if style.generate_final_parameters else ""

    @property
    def getter_name(self) -> str:
        prefix = "is" if self.is_boolean else "get"
        return prefix + self.capitalized_name

    @property
    def setter_name(self) -> str:
        return "set" + self.capitalized_name

    def declaration(self) -> str:
        """Constructor or setter parameter declaration."""
        return f"{self.annotations}{self.final_parameter}{self.declaration_type} {self.parameter_name}"

    def assignment(self) -> str:
        """Assign the parameter to the field, qualifying the field when the names collide."""
        if self.field_name == self.parameter_name:
            return f"this.{self.field_name} = {self.parameter_name};"
        return f"{self.field_name} = {self.parameter_name};"


def _annotation_text(parameter: ParameterDescriptor) -> str:
    """Render the resolvable annotations of a parameter, each followed by a space.

    Annotations whose type did not resolve are dropped.
    """
    return "".join(
        f"@{annotation.qualified_name}{annotation.argument_text} "
        for annotation in parameter.annotations
        if annotation.is_resolved
    )


class ParameterObjectBuilder:
    """Accumulates fields and class identity, then renders the class in one pass.

    Example:
        builder = ParameterObjectBuilder(StyleConfiguration())
        builder.set_class_name("Point")
        builder.set_package_name("geometry")
        builder.add_field(ParameterDescriptor("x", "int"), setter_required=False)
        source = builder.render()

    Fields, constructor parameters, getters and setters all follow the order in
    which add_field was called.
    """

    def __init__(self, style: Optional[StyleConfiguration] = None) -> None:
        """Initialize the builder.

        Args:
            style: Code style to render with; may also be set later with set_style_configuration
        """
        self.class_name: Optional[str] = None
        self.package_name: Optional[str] = None
        self.type_parameters: list[str] = []
        self.fields: list[ParameterSpec] = []
        self.style = style

    def set_class_name(self, class_name: str) -> None:
        """Set the simple name of the generated class.

        Raises:
            ConfigurationError: If the name is not a Java identifier
        """
        if not isinstance(class_name, str) or not JAVA_IDENTIFIER.fullmatch(class_name):
            raise ConfigurationError(f"Invalid class name: '{class_name}'")
        self.class_name = class_name

    def set_package_name(self, package_name: str) -> None:
        """Set the package of the generated class. An empty name omits the package clause.

        Raises:
            ConfigurationError: If the name is not a dotted sequence of Java identifiers
        """
        if not isinstance(package_name, str):
            raise ConfigurationError("Package name must be a string, use '' for the default package")
        if package_name and not JAVA_PACKAGE.fullmatch(package_name):
            raise ConfigurationError(f"Invalid package name: '{package_name}'")
        self.package_name = package_name

    def set_type_arguments(self, type_parameters: Iterable[str]) -> None:
        """Replace the generic type parameters of the generated class.

        Args:
            type_parameters: Type parameter declarations in order (e.g. ['K', 'V extends Number'])

        Raises:
            ConfigurationError: If any type parameter is blank or not a string
        """
        type_parameters = list(type_parameters)
        if any(not isinstance(param, str) or not param.strip() for param in type_parameters):
            raise ConfigurationError("Type parameters must not be blank")
        self.type_parameters = type_parameters

    def set_style_configuration(self, style: StyleConfiguration) -> None:
        """Set the code style used to name fields and parameters."""
        self.style = style

    def add_field(self, parameter: ParameterDescriptor, setter_required: bool) -> None:
        """Append a field derived from a parameter.

        Args:
            parameter: The original parameter
            setter_required: Whether the field gets a setter; otherwise it is final
        """
        self.fields.append(ParameterSpec(parameter, setter_required))

    def render(self) -> str:
        """Render the complete class source.

        Returns:
            The class text: package clause, class header, fields, constructor,
            getters and setters, in that order

        Raises:
            ConfigurationError: If class name, package name or style was never set
            MalformedParameterError: If a parameter cannot yield a name or type
        """
        style = self._check_configured()
        renderings = [_FieldRendering(spec, style) for spec in self.fields]
        logger.debug(
            "Rendering parameter object %s with %d field(s)", self.class_name, len(renderings)
        )

        out: list[str] = []
        if self.package_name:
            out.append(f"package {self.package_name};\n")
        header = f"public class {self.class_name}"
        if self.type_parameters:
            header += "<" + ",".join(self.type_parameters) + ">"
        out.append(header + "{\n")
        self._output_fields(renderings, out)
        self._output_constructor(renderings, out)
        self._output_getters(renderings, out)
        self._output_setters(renderings, out)
        out.append("}\n")
        return "".join(out)

    build_bean_class = render

    def _check_configured(self) -> StyleConfiguration:
        missing = []
        if self.class_name is None:
            missing.append("class name")
        if self.package_name is None:
            missing.append("package name")
        if self.style is None:
            missing.append("style configuration")
        if missing:
            raise ConfigurationError(f"Cannot render before setting: {', '.join(missing)}")
        return cast(StyleConfiguration, self.style)

    def _output_fields(self, renderings: list[_FieldRendering], out: list[str]) -> None:
        for rendering in renderings:
            if rendering.doc_comment:
                out.append(rendering.doc_comment + "\n")
            modifiers = "private " if rendering.setter_required else "private final "
            out.append(
                f"{INDENT}{rendering.annotations}{modifiers}"
                f"{rendering.storage_type} {rendering.field_name};\n"
            )

    def _output_constructor(self, renderings: list[_FieldRendering], out: list[str]) -> None:
        parameters = ", ".join(rendering.declaration() for rendering in renderings)
        out.append(f"\n{INDENT}public {self.class_name}({parameters}){{\n")
        for rendering in renderings:
            out.append(f"{INDENT * 2}{rendering.assignment()}\n")
        out.append(f"{INDENT}}}\n")

    def _output_getters(self, renderings: list[_FieldRendering], out: list[str]) -> None:
        for rendering in renderings:
            out.append(
                f"\n{INDENT}{rendering.annotations}public "
                f"{rendering.storage_type} {rendering.getter_name}(){{\n"
            )
            out.append(f"{INDENT * 2}return {rendering.field_name};\n")
            out.append(f"{INDENT}}}\n")

    def _output_setters(self, renderings: list[_FieldRendering], out: list[str]) -> None:
        for rendering in renderings:
            if not rendering.setter_required:
                continue
            out.append(
                f"\n{INDENT}public void {rendering.setter_name}({rendering.declaration()}){{\n"
            )
            out.append(f"{INDENT * 2}{rendering.assignment()}\n")
            out.append(f"{INDENT}}}\n")
