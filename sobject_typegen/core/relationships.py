"""Classification of sObject child relationships.

Describe metadata for child relationships is irregular: some relationships
have no traversable name, junction objects expose one side per parent, and
plenty of children are outside the set of sObjects being generated. Each
child relationship is normalized into a ``RelationshipEmission`` saying which
properties (if any) the parent interface gets.
"""

from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .ir import IRChildRelationship


class RelationshipKind(str, Enum):
    """How a child relationship is represented on the parent interface."""

    NAMED_KNOWN = "named_known"
    NAMED_UNMAPPED = "named_unmapped"
    JUNCTION = "junction"
    SPECIAL_CHILD = "special_child"
    NONE = "none"


@dataclass(frozen=True)
class TSProperty:
    """One ``name: type;`` line of a generated interface."""

    name: str
    type_expression: str

    def render(self) -> str:
        return f"{self.name}: {self.type_expression};"


@dataclass(frozen=True)
class RelationshipEmission:
    """Result of classifying one child relationship."""

    kind: RelationshipKind
    child_sobject: str
    properties: tuple[TSProperty, ...] = field(default_factory=tuple)

    @property
    def is_unmapped(self) -> bool:
        """True when the child needs a fallback stub type."""
        return self.kind is RelationshipKind.NAMED_UNMAPPED


def child_records_type(child_sobject: str) -> str:
    """Return ``ChildRecords<Child, 'Child'>``."""
    return f"ChildRecords<{child_sobject}, '{child_sobject}'>"


def classify(
    child: IRChildRelationship,
    known: Collection[str],
    special_children: Sequence[str] = (),
) -> RelationshipEmission:
    """Classify a child relationship. The first matching rule wins.

    Args:
        child: The child relationship from the parent's describe
        known: sObject names declared by the current run
        special_children: Remaining allow-list entries for the parent being
            built. Only entries after position 0 are ever matched.

    Returns:
        The emission; callers record ``child_sobject`` as unmapped when
        ``is_unmapped`` is set and drop matched SPECIAL_CHILD entries from
        their allow-list copy.
    """
    name = child.child_sobject
    is_known = name in known

    if child.relationship_name:
        prop = TSProperty(child.relationship_name, child_records_type(name))
        kind = RelationshipKind.NAMED_KNOWN if is_known else RelationshipKind.NAMED_UNMAPPED
        return RelationshipEmission(kind, name, (prop,))

    if not is_known:
        return RelationshipEmission(RelationshipKind.NONE, name)

    if child.is_junction:
        props = tuple(
            TSProperty(target, child_records_type(name))
            for target in child.junction_reference_to
        )
        return RelationshipEmission(RelationshipKind.JUNCTION, name, props)

    # index 0 of the allow-list is never matched
    index = _index_of(special_children, name)
    if index > 0:
        return RelationshipEmission(
            RelationshipKind.SPECIAL_CHILD, name, (TSProperty(name, name),)
        )
    return RelationshipEmission(RelationshipKind.NONE, name)


def _index_of(items: Sequence[str], value: str) -> int:
    for i, item in enumerate(items):
        if item == value:
            return i
    return -1
