"""TypeScript type generator for sObject describe results.

Entity interfaces are assembled line by line from the IR; the fixed preamble
files and the document wrapper are rendered from Jinja2 templates.

Supports custom templates via the template_dir parameter:
    generator = TypeGenerator(source, output_dir, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import asyncio
import logging
import os
from collections.abc import Callable, Collection, Sequence
from pathlib import Path
from typing import Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig, load_config
from .errors import GenerationModeError
from .executor import SchemaSource
from .ir import IREntity, UnmappedEntities
from .references import resolve_reference
from .relationships import RelationshipKind, classify
from .scalars import map_scalar

logger = logging.getLogger(__name__)

SOBJECT_FILE = "sobject.ts"
FIELD_TYPES_FILE = "sobjectFieldTypes.ts"
BATCH_FILE = "sobjects.ts"

# Inherited from SObject, never redeclared
ID_FIELD = "Id"
CALCULATED = "calculated"
INDENT = "  "


def file_stem(sobject_name: str) -> str:
    """Normalize an sObject name for a file name.

    Drops a trailing ``__c``, removes underscores and lowercases:
    ``Invoice_Line__c`` -> ``invoiceline``.
    """
    if sobject_name.endswith("__c"):
        sobject_name = sobject_name[: -len("__c")]
    return sobject_name.replace("_", "").lower()


class EntityBlockBuilder:
    """Builds the ``export interface`` block for one sObject.

    Args:
        known: sObject names declared by the current run
        special_children: Allow-list of children to expose as a bare
            singular property when their relationship has no name
        unmapped: Accumulator shared by every build of the run
    """

    def __init__(
        self,
        known: Collection[str] = frozenset(),
        special_children: Sequence[str] = (),
        unmapped: UnmappedEntities | None = None,
    ):
        self.known = frozenset(known)
        self.special_children = list(special_children)
        self.unmapped = unmapped if unmapped is not None else UnmappedEntities()

    def build(self, entity: IREntity) -> str:
        """Return the interface declaration for ``entity``."""
        lines = [
            f"export interface {entity.name} extends SObjectAttribute<'{entity.name}'> {{"
        ]
        lines.extend(self._field_lines(entity))
        lines.extend(self._relationship_lines(entity))
        lines.append("};")
        return "\n".join(lines)

    def _field_lines(self, entity: IREntity) -> list[str]:
        lines = []
        for field in entity.fields:
            if field.name == ID_FIELD:
                continue
            ts_type = map_scalar(field.type_tag)
            annotations = (CALCULATED,) if field.calculated else ()
            lines.append(f"{INDENT}{field.name}: {ts_type.render(*annotations)}")

            ref_type = resolve_reference(field, self.known)
            if ref_type:
                lines.append(f"{INDENT}{field.relationship_name}: {ref_type};")
        return lines

    def _relationship_lines(self, entity: IREntity) -> list[str]:
        lines = []
        # Matched entries are consumed per entity
        remaining = list(self.special_children)
        for child in entity.child_relationships:
            emission = classify(child, self.known, remaining)
            if emission.is_unmapped:
                self.unmapped.add(emission.child_sobject)
            elif emission.kind is RelationshipKind.SPECIAL_CHILD:
                remaining.remove(emission.child_sobject)
            lines.extend(f"{INDENT}{prop.render()}" for prop in emission.properties)
        return lines


class TypeGenerator:
    """Generates TypeScript definitions from sObject descriptions.

    Supports custom templates via the template_dir parameter.
    Templates in template_dir take precedence over built-in templates.

    Available templates to override:
        - _header.ts.j2: "do not modify" banner included by every file
        - sobject.ts.j2: base SObject interface
        - sobjectFieldTypes.ts.j2: scalar aliases and generics
        - document.ts.j2: imports, entity blocks and unmapped stubs

    Example:
        async with RestSchemaSource(settings) as source:
            generator = TypeGenerator(source, output_dir="./types")
            await generator.generate(config_path="./typegen.json")
    """

    def __init__(
        self,
        source: SchemaSource | None,
        output_dir: str,
        template_dir: Optional[str] = None,
        progress: Callable[[str], None] | None = None,
    ):
        """Initialize the generator.

        Args:
            source: Where sObject descriptions come from. May be None when
                only the preamble files are needed.
            output_dir: Directory where generated files will be written
            template_dir: Optional directory with custom Jinja2 templates.
            progress: Receives user-facing progress lines such as
                "Processing... Account". Defaults to INFO logging.
        """
        self.source = source
        self.progress = progress
        self.output_dir = output_dir
        self.template_dir = template_dir
        self.created_files: list[str] = []

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("sobject_typegen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    async def generate(
        self,
        sobject: str | None = None,
        config_path: str | None = None,
    ) -> list[str]:
        """Write the preamble, then single or batch output.

        Exactly one of ``sobject`` and ``config_path`` must be given. The
        preamble files are written even when that check fails.

        Returns:
            Paths of every file written, in write order

        Raises:
            GenerationModeError: If both or neither mode was requested
            ConfigError: If the config file cannot be parsed
            DescribeError: If any describe call fails
        """
        self.write_preamble()
        if sobject and config_path:
            raise GenerationModeError("Please provide only -s or -c, not both")
        if sobject:
            await self.generate_sobject(sobject)
        elif config_path:
            config = load_config(config_path)
            await self.generate_batch(config)
        else:
            raise GenerationModeError("Please provide a -s or -c")
        return self.created_files

    def render_preamble(self) -> tuple[str, str]:
        """Render the schema-independent base files."""
        sobject = self.env.get_template("sobject.ts.j2").render()
        field_types = self.env.get_template("sobjectFieldTypes.ts.j2").render()
        return sobject, field_types

    def write_preamble(self):
        sobject, field_types = self.render_preamble()
        self._write_file(SOBJECT_FILE, sobject)
        self._write_file(FIELD_TYPES_FILE, field_types)

    async def generate_sobject(self, sobject_name: str) -> str:
        """Generate ``<stem>.ts`` for a single sObject.

        No other sObject is known in this mode, so reference fields get no
        relationship property; named children are stubbed.
        """
        self._report(f"Processing... {sobject_name}")
        entity = await self._describe(sobject_name)
        unmapped = UnmappedEntities()
        block = EntityBlockBuilder(unmapped=unmapped).build(entity)
        content = self.render_document([block], unmapped, declared={entity.name})
        return self._write_file(f"{file_stem(sobject_name)}.ts", content)

    async def generate_batch(self, config: GeneratorConfig) -> str:
        """Generate ``sobjects.ts`` for every configured sObject."""
        content = await self.generate_batch_contents(config)
        self._report("Writing to file...")
        return self._write_file(BATCH_FILE, content)

    async def generate_batch_contents(self, config: GeneratorConfig) -> str:
        """Describe all configured sObjects and assemble the document.

        Describes run concurrently; blocks are assembled in config order
        regardless of completion order.
        """
        for name in config.sobjects:
            self._report(f"Processing... {name}")
        entities = await self._describe_all(config.sobjects)

        # Describe results carry the canonical API names
        declared = {entity.name for entity in entities}
        unmapped = UnmappedEntities()
        builder = EntityBlockBuilder(
            known=declared,
            special_children=config.special_children_to_map,
            unmapped=unmapped,
        )
        blocks = [builder.build(entity) for entity in entities]
        return self.render_document(blocks, unmapped, declared=declared)

    def render_document(
        self,
        blocks: Sequence[str],
        unmapped: UnmappedEntities,
        declared: Collection[str] = (),
    ) -> str:
        """Render header, imports, blocks and the unmapped-types section."""
        stubs = unmapped.sorted(exclude=set(declared))
        if stubs:
            logger.debug("Unmapped types: %s", ", ".join(stubs))
        return self.env.get_template("document.ts.j2").render(
            blocks=blocks,
            unmapped=stubs,
        )

    async def _describe_all(self, names: Sequence[str]) -> list[IREntity]:
        """Describe concurrently; results keep the order of ``names``.

        The first failure cancels the describes still in flight.
        """
        tasks = [asyncio.ensure_future(self._describe(name)) for name in names]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    def _report(self, message: str):
        if self.progress is not None:
            self.progress(message)
        else:
            logger.info(message)

    async def _describe(self, sobject_name: str) -> IREntity:
        if self.source is None:
            raise RuntimeError("No schema source configured.")
        return await self.source.describe(sobject_name)

    def _write_file(self, file_name: str, content: str) -> str:
        """Write one output file and record it."""
        os.makedirs(self.output_dir, exist_ok=True)
        full_path = os.path.join(self.output_dir, file_name)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)
        self.created_files.append(full_path)
        logger.debug("Wrote %s", full_path)
        return full_path
