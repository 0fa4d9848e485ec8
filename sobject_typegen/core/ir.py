"""Intermediate Representation (IR) for sObject describe results.

This module defines dataclasses that represent the parts of a Salesforce
describe payload that matter for type generation, independent of where the
payload came from (REST call or saved JSON file).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IRField:
    """Represents a single field of an sObject."""
    name: str
    type_tag: str
    calculated: bool = False
    # Only meaningful when type_tag == "reference"
    reference_to: tuple[str, ...] = ()
    relationship_name: str | None = None

    @property
    def is_reference(self) -> bool:
        return self.type_tag == "reference"


@dataclass(frozen=True)
class IRChildRelationship:
    """Represents a child relationship (one-to-many or junction) of an sObject."""
    child_sobject: str
    relationship_name: str | None = None
    junction_reference_to: tuple[str, ...] = ()

    @property
    def is_junction(self) -> bool:
        return len(self.junction_reference_to) > 0


@dataclass(frozen=True)
class IREntity:
    """Complete description of one sObject."""
    name: str
    fields: tuple[IRField, ...] = ()
    child_relationships: tuple[IRChildRelationship, ...] = ()


@dataclass
class UnmappedEntities:
    """Accumulates sObject names referenced by named child relationships
    but missing from the known set.

    One instance lives for one generation run and is threaded through every
    block build, so the stub section can be emitted once at the end.
    """
    names: set[str] = field(default_factory=set)

    def add(self, name: str):
        self.names.add(name)

    def sorted(self, exclude: set[str] | frozenset[str] = frozenset()) -> list[str]:
        """Return accumulated names in lexicographic order, minus ``exclude``."""
        return sorted(n for n in self.names if n not in exclude)
