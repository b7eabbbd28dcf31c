"""Type corpus classification: interfaces, classes and behavior subclasses."""

from collections.abc import Iterable
from typing import Optional

from .models import TypeCounts, TypeDescriptor

BEHAVIOR_BASE = "MonoBehaviour"


def is_behavior_subclass(descriptor: TypeDescriptor, base_marker: str = BEHAVIOR_BASE) -> bool:
    """
    Return True if any ancestor of the type is exactly ``base_marker``.

    The walk starts at the immediate parent, so the base type itself is not
    its own subclass. Only the single parent chain is followed; interfaces
    are never consulted. The chain must be finite.
    """
    for ancestor in descriptor.ancestors:
        if ancestor == base_marker:
            return True
    return False


def tally_types(
    types: Optional[Iterable[TypeDescriptor]], base_marker: str = BEHAVIOR_BASE
) -> TypeCounts:
    """Count interfaces and classes, splitting classes by behavior ancestry.

    Types flagged as neither interface nor class (structs, enums) are not
    counted anywhere.
    """
    interfaces = 0
    classes = 0
    behaviors = 0

    for descriptor in types or ():
        if descriptor.is_interface:
            interfaces += 1
        if descriptor.is_class:
            classes += 1
            if is_behavior_subclass(descriptor, base_marker):
                behaviors += 1

    return TypeCounts(
        class_count=classes,
        interface_count=interfaces,
        behavior_subclass_count=behaviors,
        non_behavior_class_count=classes - behaviors,
    )
