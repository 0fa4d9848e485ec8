"""Typing of reference (lookup / master-detail) fields.

A reference field can be polymorphic (``OwnerId`` -> ``User | Group``). Only
targets that the current run declares are surfaced, so the generated union
never points at an undeclared type.
"""

from collections.abc import Collection

from .ir import IRField


def resolve_reference(field: IRField, known: Collection[str]) -> str | None:
    """Return the union type for a reference field's relationship property.

    Targets keep the order they have on the field. Returns None when the
    field is not a traversable reference or none of its targets are known.
    """
    if not field.is_reference or not field.relationship_name:
        return None
    targets = [t for t in field.reference_to if t in known]
    if not targets:
        return None
    return " | ".join(targets)
