"""Read-only snapshots of the parameters that become parameter object fields.

The refactoring front end resolves each extracted parameter against its own
symbol model and hands the builder plain records. Nothing here refers back to
a live model, so rendering depends only on the values captured in these records.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

STATIC_MODIFIER = "static"


@dataclass(frozen=True)
class AnnotationDescriptor:
    """An annotation attached to a parameter.

    Attributes:
        qualified_name: Fully qualified name of the annotation type, or None when
            the annotation type could not be resolved
        argument_text: Original argument list text including parentheses
            (e.g. '(value = "id")'), or an empty string for marker annotations
    """

    qualified_name: Optional[str]
    argument_text: str = ""

    @property
    def is_resolved(self) -> bool:
        return bool(self.qualified_name)


@dataclass(frozen=True)
class ParameterDescriptor:
    """Snapshot of one original method parameter.

    Attributes:
        name: The parameter name as written in the original method
        type_text: Canonical type text. Variable-arity parameters may use either
            the array form ('String[]') or the ellipsis form ('String...')
        var_args: Whether the parameter is the trailing variable-arity parameter
        modifiers: Modifier keywords attached to the parameter
        annotations: Annotations in source order
        doc_comment: Documentation comment attached to the parameter, verbatim
    """

    name: str
    type_text: str
    var_args: bool = False
    modifiers: FrozenSet[str] = field(default_factory=frozenset)
    annotations: Tuple[AnnotationDescriptor, ...] = ()
    doc_comment: Optional[str] = None

    @property
    def is_static(self) -> bool:
        return STATIC_MODIFIER in self.modifiers


@dataclass(frozen=True)
class ParameterSpec:
    """One field of the generated class.

    Attributes:
        parameter: The original parameter the field is derived from
        setter_required: When False the field is final and only the constructor sets it
    """

    parameter: ParameterDescriptor
    setter_required: bool
