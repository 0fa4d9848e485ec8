"""Core modules for sObject type generation."""

from .auth import Auth, BearerAuth
from .config import ConnectionSettings, GeneratorConfig, load_config, parse_config
from .errors import ConfigError, DescribeError, GenerationModeError, TypegenError
from .executor import FileSchemaSource, RestSchemaSource, SchemaSource
from .generator import EntityBlockBuilder, TypeGenerator, file_stem
from .ir import IRChildRelationship, IREntity, IRField, UnmappedEntities
from .parser import DescribeParser
from .references import resolve_reference
from .relationships import RelationshipEmission, RelationshipKind, TSProperty, classify
from .scalars import FieldType, TSType, map_scalar

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    # Config
    "ConnectionSettings",
    "GeneratorConfig",
    "load_config",
    "parse_config",
    # Errors
    "ConfigError",
    "DescribeError",
    "GenerationModeError",
    "TypegenError",
    # Schema sources
    "FileSchemaSource",
    "RestSchemaSource",
    "SchemaSource",
    # IR types
    "IRChildRelationship",
    "IREntity",
    "IRField",
    "UnmappedEntities",
    # Parser
    "DescribeParser",
    # Type mapping
    "FieldType",
    "TSType",
    "map_scalar",
    "resolve_reference",
    "RelationshipEmission",
    "RelationshipKind",
    "TSProperty",
    "classify",
    # Generator
    "EntityBlockBuilder",
    "TypeGenerator",
    "file_stem",
]
