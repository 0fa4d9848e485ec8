"""Configuration models for sobject-typegen.

The batch config is a JSON document:

    {
        "sobjects": ["Account", "Contact", "Opportunity"],
        "specialChildrenToMap": ["Contact", "Case"]
    }

``entityNames`` is accepted in place of ``sobjects``.
"""

import json

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

DEFAULT_API_VERSION = "59.0"


class GeneratorConfig(BaseModel):
    """Batch-mode configuration."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sobjects: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("sobjects", "entityNames"),
    )
    special_children_to_map: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("specialChildrenToMap", "special_children_to_map"),
    )


class ConnectionSettings(BaseModel):
    """Where and how to reach the org's REST API."""

    instance_url: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION

    @property
    def describe_base_url(self) -> str:
        return f"{self.instance_url.rstrip('/')}/services/data/v{self.api_version}/sobjects"


def parse_config(content: str, path: str | None = None) -> GeneratorConfig:
    """Parse a config document.

    Raises:
        ConfigError: If the content is not valid JSON or has the wrong shape.
            The original exception is chained as ``__cause__``.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON: {e}", path=path) from e
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}", path=path) from e


def load_config(path: str) -> GeneratorConfig:
    """Read and parse a config file."""
    with open(path, encoding="utf-8") as f:
        content = f.read()
    return parse_config(content, path=path)
