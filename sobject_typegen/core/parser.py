"""sObject describe parser.

Turns the JSON returned by ``/sobjects/{name}/describe`` (or a saved copy of
it) into an ``IREntity``. Only the keys used for type generation are read;
everything else in the payload is ignored.
"""

import json
import logging
import os
from typing import Any

from .errors import DescribeError
from .ir import IRChildRelationship, IREntity, IRField

logger = logging.getLogger(__name__)


class DescribeParser:
    """Parses describe payloads into IR."""

    def parse(self, payload: dict[str, Any]) -> IREntity:
        """Parse one describe payload."""
        try:
            name = payload["name"]
        except (KeyError, TypeError) as e:
            raise DescribeError(f"Describe payload has no sObject name: {e}") from e

        try:
            fields = tuple(self._process_field(f) for f in payload.get("fields") or [])
            children = tuple(
                self._process_child_relationship(c)
                for c in payload.get("childRelationships") or []
            )
        except (KeyError, TypeError) as e:
            raise DescribeError(f"Malformed describe payload for {name}: missing {e}") from e
        logger.debug(
            "Parsed %s: %d fields, %d child relationships",
            name, len(fields), len(children),
        )
        return IREntity(name=name, fields=fields, child_relationships=children)

    def parse_file(self, file_path: str) -> IREntity:
        """Parse a describe payload saved as JSON."""
        with open(file_path) as f:
            content = f.read()
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            raise DescribeError(
                f"Invalid describe JSON in {os.path.basename(file_path)}: {e}"
            ) from e
        return self.parse(payload)

    @staticmethod
    def _process_field(node: dict[str, Any]) -> IRField:
        return IRField(
            name=node["name"],
            type_tag=node.get("type") or "",
            calculated=bool(node.get("calculated")),
            reference_to=tuple(node.get("referenceTo") or ()),
            relationship_name=node.get("relationshipName") or None,
        )

    @staticmethod
    def _process_child_relationship(node: dict[str, Any]) -> IRChildRelationship:
        return IRChildRelationship(
            child_sobject=node["childSObject"],
            relationship_name=node.get("relationshipName") or None,
            junction_reference_to=tuple(node.get("junctionReferenceTo") or ()),
        )
