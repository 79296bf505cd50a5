"""CLI commands for inspecting service configuration."""

import json
import logging
import sys
from pathlib import Path

import click
import structlog
import yaml

from niuniu_config import __version__
from niuniu_config.config.constants import COMPONENT_CLI
from niuniu_config.config.env import CONFIG_ENV_BINDINGS
from niuniu_config.config.error_hints import format_validation_error, get_error_hint
from niuniu_config.config.errors import ConfigError, ConfigTypeError
from niuniu_config.config.loader import ConfigLoader
from niuniu_config.config.redact import redact_document
from niuniu_config.config.schemas import Config
from niuniu_config.config.settings import LoaderSettings
from niuniu_config.observability.logging import configure_logging, parse_level
from niuniu_config.observability.metrics import LoaderMetrics


logger = structlog.get_logger()


def _build_loader(config_dirs: tuple[Path, ...]) -> ConfigLoader:
    """Create a loader from NIUNIU_* settings plus --config-dir options."""
    settings = LoaderSettings()
    try:
        return ConfigLoader(
            search_dirs=[*settings.search_dirs(), *config_dirs],
            config_name=settings.config_name,
            config_type=settings.config_type,
        )
    except ConfigTypeError as e:
        logger.warning("config_load_failed", component=COMPONENT_CLI, error=str(e))
        click.echo(f"Configuration loading failed: {e}", err=True)
        click.echo(f"  Hint: {get_error_hint(e.error_type)}", err=True)
        sys.exit(1)


def _load_or_exit(loader: ConfigLoader) -> Config:
    """Load configuration, printing each error with a hint on failure."""
    log = logger.bind(component=COMPONENT_CLI)
    try:
        return loader.load()
    except ConfigError as e:
        log.warning("config_load_failed", error=str(e), errors=loader.errors)

        click.echo("Configuration loading failed:", err=True)
        for error in loader.errors:
            formatted = format_validation_error(
                location=error["loc"],
                message=error["msg"],
                error_type=error.get("type", "unknown"),
                include_hint=True,
            )
            click.echo(f"  - {formatted}", err=True)

        sys.exit(1)


config_dir_option = click.option(
    "--config-dir",
    "config_dirs",
    multiple=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Extra directory to search after the working directory (repeatable).",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--json-logs/--no-json-logs",
    default=True,
    help="Use JSON format for logs (default: true).",
)
@click.option(
    "--log-level",
    default="warn",
    show_default=True,
    help="Log level name (trace, debug, info, warn, error, fatal, panic).",
)
def cli(json_logs: bool, log_level: str) -> None:
    """Configuration tools for the niuNiu SDK backend."""
    configure_logging(
        level=parse_level(log_level, default=logging.WARNING), json_format=json_logs
    )


@cli.command()
@config_dir_option
def validate(config_dirs: tuple[Path, ...]) -> None:
    """Load config.yaml and report whether it decodes cleanly."""
    loader = _build_loader(config_dirs)
    config = _load_or_exit(loader)

    click.echo(f"Configuration loaded from {loader.config_file}")
    click.echo(f"  AppName: {config.app_name}")
    click.echo(f"  ChannelType: {config.msg_channel.channel_type or '<unset>'}")
    if loader.env_overrides:
        click.echo(f"  Env overrides: {', '.join(loader.env_overrides)}")
    click.echo(f"  Checksum: {config.compute_checksum()}")

    logger.info(
        "config_validated",
        component=COMPONENT_CLI,
        metrics=LoaderMetrics.get_instance().to_dict(),
    )


@cli.command()
@config_dir_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--show-secrets",
    is_flag=True,
    help="Print the database DSN without masking its password.",
)
def show(config_dirs: tuple[Path, ...], output_format: str, show_secrets: bool) -> None:
    """Print the merged configuration, environment overlay included."""
    config = _load_or_exit(_build_loader(config_dirs))

    document = config.to_document()
    if not show_secrets:
        document = redact_document(document)

    if output_format == "json":
        click.echo(json.dumps(document, indent=2, sort_keys=True))
    else:
        click.echo(yaml.safe_dump(document, default_flow_style=False, sort_keys=False), nl=False)


@cli.command("env-keys")
def env_keys() -> None:
    """List the environment variables that override document keys."""
    for binding in CONFIG_ENV_BINDINGS:
        click.echo(f"{binding.env_key}\t{binding.document_key}")


def main() -> None:
    """Entry point for the niuniu-config script."""
    cli()


if __name__ == "__main__":
    main()
