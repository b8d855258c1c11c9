"""
Command-line interface for generating and downloading OpenAPI documentation.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from botocore.exceptions import BotoCoreError, ClientError

from .aws import AwsProvider
from .config import Service, load_service_config
from .downloader import DocumentationDownloader
from .exceptions import DocumentationError
from .generator import DocumentationGenerator
from .models import DEFAULT_EXTENSIONS, DocumentationOptions

app = typer.Typer(help="Generate OpenAPI documentation from serverless configuration")


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def generate(
    config_file: Path = typer.Argument(..., help="Path to the serverless configuration file"),
    output_file: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Path to save the documentation. A .yml/.yaml extension writes YAML, anything else JSON",
    ),
    export_type: Optional[str] = typer.Option(
        None,
        "--export-type",
        "-t",
        help="Use oas30 or openapi30 for OpenAPI 3.0.1, anything else produces Swagger 2.0",
    ),
) -> None:
    """Generate an OpenAPI document from the documented http events."""
    options = DocumentationOptions(output_file_name=str(output_file), export_type=export_type)

    try:
        config = load_service_config(config_file)
        generator = DocumentationGenerator(
            Service(config.functions), options, template=config.documentation
        )
        document = generator.generate_documentation()
    except (DocumentationError, OSError) as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Documented {len(document['paths'])} paths in {output_file}")


@app.command()
def download(
    config_file: Path = typer.Argument(..., help="Path to the serverless configuration file"),
    output_file: Path = typer.Option(..., "--output", "-o", help="Path to save the exported documentation"),
    extensions: str = typer.Option(
        DEFAULT_EXTENSIONS, "--extensions", help="API Gateway export extensions"
    ),
    stage: Optional[str] = typer.Option(None, "--stage", "-s", help="Override the provider stage"),
    region: Optional[str] = typer.Option(None, "--region", "-r", help="Override the provider region"),
    profile: Optional[str] = typer.Option(None, "--profile", help="AWS profile to use"),
) -> None:
    """Download the documentation published for the deployed stack."""
    options = DocumentationOptions(output_file_name=str(output_file), extensions=extensions)

    try:
        config = load_service_config(config_file)
        stage = stage or config.provider.stage
        region = region or config.provider.region
        stack_name = config.get_stack_name(stage)
        downloader = DocumentationDownloader(
            AwsProvider(profile=profile, region=region),
            options,
            stack_name=stack_name,
            stage=stage,
            region=region,
        )
        downloader.download_documentation()
    except (DocumentationError, OSError, BotoCoreError, ClientError) as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Successfully downloaded documentation of {stack_name} to {output_file}")


def main():
    """Entry point for the CLI."""
    app()
