"""Command-line interface for sobject-typegen."""

import asyncio
import logging
import sys

import click
import httpx

from .core.config import DEFAULT_API_VERSION, ConnectionSettings
from .core.errors import ConfigError, DescribeError, GenerationModeError
from .core.executor import FileSchemaSource, RestSchemaSource
from .core.generator import TypeGenerator


def configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger("sobject_typegen")
    root.handlers[:] = [handler]
    root.setLevel(logging.INFO if verbose else logging.WARNING)
    root.propagate = False


async def _run_generator(
    generator: TypeGenerator,
    sobject: str | None,
    config: str | None,
    settings: ConnectionSettings | None,
) -> list[str]:
    """Run the generator, owning the HTTP client when one is needed."""
    if settings is None:
        return await generator.generate(sobject=sobject, config_path=config)
    async with RestSchemaSource(settings) as source:
        generator.source = source
        return await generator.generate(sobject=sobject, config_path=config)


@click.group()
@click.version_option(package_name="sobject-typegen")
def main():
    """Salesforce sObject to TypeScript type generator.

    Generate TypeScript interfaces from sObject describe results.
    """
    pass


@main.command()
@click.option(
    "--sobject",
    "-s",
    help="Single sObject to generate, e.g. Account or Invoice__c.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON config with 'sobjects' and 'specialChildrenToMap' lists.",
)
@click.option(
    "--outputdir",
    "-d",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated .ts files.",
)
@click.option(
    "--instance-url",
    envvar="SF_INSTANCE_URL",
    help="Org instance URL, e.g. https://example.my.salesforce.com.",
)
@click.option(
    "--access-token",
    envvar="SF_ACCESS_TOKEN",
    help="OAuth access token or session id for the org.",
)
@click.option(
    "--api-version",
    envvar="SF_API_VERSION",
    default=DEFAULT_API_VERSION,
    show_default=True,
    help="REST API version.",
)
@click.option(
    "--describe-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Read saved describe results (<Name>.json) instead of calling the org.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    sobject: str | None,
    config: str | None,
    outputdir: str,
    instance_url: str | None,
    access_token: str | None,
    api_version: str,
    describe_dir: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate TypeScript types for one sObject or a configured set.

    Examples:

        sobject-typegen generate -s Account -d ./types

        sobject-typegen generate -c ./typegen.json -d ./types

        sobject-typegen generate -c ./typegen.json -d ./types --describe-dir ./describes
    """
    configure_logging(verbose)

    settings = None
    generator = TypeGenerator(None, outputdir, template_dir=template_dir, progress=click.echo)
    if describe_dir:
        generator.source = FileSchemaSource(describe_dir)
    elif instance_url and access_token:
        settings = ConnectionSettings(
            instance_url=instance_url,
            access_token=access_token,
            api_version=api_version,
        )
    elif bool(sobject) != bool(config):
        raise click.UsageError(
            "Provide --describe-dir, or --instance-url and --access-token"
        )

    if verbose:
        if describe_dir:
            click.echo(f"Describes: {describe_dir}")
        elif settings:
            click.echo(f"Org: {settings.describe_base_url}")
        click.echo(f"Output: {outputdir}")

    try:
        created_files = asyncio.run(_run_generator(generator, sobject, config, settings))
    except GenerationModeError as e:
        raise click.UsageError(str(e))
    except ConfigError as e:
        click.echo(f"FAILED TO PARSE JSON: '{e.path}'", err=True)
        raise click.ClickException(e.message)
    except DescribeError as e:
        raise click.ClickException(e.message)
    except httpx.HTTPError as e:
        raise click.ClickException(f"Could not reach the org: {e}")

    if verbose:
        for path in created_files:
            click.echo(f"  {path}")
    click.echo(f"Done! Generated {len(created_files)} files in {outputdir}")


if __name__ == "__main__":
    main()
