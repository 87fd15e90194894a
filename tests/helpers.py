"""Builders for test data shared across test modules."""

from typing import Optional

from paramobject.core.model import AnnotationDescriptor, ParameterDescriptor


def make_parameter(
    name: str,
    type_text: str = "int",
    *,
    var_args: bool = False,
    static: bool = False,
    annotations: tuple[AnnotationDescriptor, ...] = (),
    doc_comment: Optional[str] = None,
) -> ParameterDescriptor:
    """Build a parameter snapshot with test-friendly defaults."""
    return ParameterDescriptor(
        name=name,
        type_text=type_text,
        var_args=var_args,
        modifiers=frozenset({"static"}) if static else frozenset(),
        annotations=annotations,
        doc_comment=doc_comment,
    )
