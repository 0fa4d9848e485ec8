"""Field type mapping from Salesforce describe types to TypeScript.

Every describe ``type`` value maps to a TypeScript type expression. Tags the
generator does not know about degrade to ``string`` and keep the original tag
as a trailing comment, so new field types added to the platform never break
generation.

Example usage:
    from sobject_typegen.core.scalars import map_scalar

    map_scalar("currency").expression   # "number"
    map_scalar("picklist").render()     # "string; // picklist"
"""

from dataclasses import dataclass
from enum import Enum


class FieldType(str, Enum):
    """Describe field types with a dedicated TypeScript mapping."""

    BOOLEAN = "boolean"
    INT = "int"
    DOUBLE = "double"
    CURRENCY = "currency"
    DATE = "date"
    DATETIME = "datetime"
    PHONE = "phone"
    STRING = "string"
    TEXTAREA = "textarea"
    REFERENCE = "reference"

    @classmethod
    def parse(cls, type_tag: str) -> "FieldType | None":
        """Return the matching member, or None for tags outside the enum."""
        try:
            return cls(type_tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class TSType:
    """A TypeScript type expression plus an optional trailing comment."""

    expression: str
    comment: str | None = None

    def render(self, *annotations: str) -> str:
        """Render as ``expr;`` with comment and extra annotations appended."""
        notes = [n for n in (self.comment, *annotations) if n]
        if notes:
            return f"{self.expression}; // {', '.join(notes)}"
        return f"{self.expression};"


ID = TSType("ID")
DATE_STRING = TSType("DateString | null")
PHONE_STRING = TSType("PhoneString")

SCALAR_MAP: dict[FieldType, TSType] = {
    FieldType.BOOLEAN: TSType("boolean"),
    FieldType.INT: TSType("number"),
    FieldType.DOUBLE: TSType("number"),
    FieldType.CURRENCY: TSType("number"),
    FieldType.DATE: DATE_STRING,
    FieldType.DATETIME: DATE_STRING,
    FieldType.PHONE: PHONE_STRING,
    FieldType.STRING: TSType("string"),
    FieldType.TEXTAREA: TSType("string"),
    FieldType.REFERENCE: ID,
}


def map_scalar(type_tag: str) -> TSType:
    """Map a describe field type to its TypeScript type.

    Never raises: unknown tags map to ``string`` annotated with the tag.
    """
    field_type = FieldType.parse(type_tag)
    if field_type is None:
        return TSType("string", comment=type_tag)
    return SCALAR_MAP[field_type]
