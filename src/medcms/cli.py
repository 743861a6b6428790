"""CLI main entry point."""

import json
import logging
from pathlib import Path

import click

from .config import Config
from .errors import FormValidationError, MedcmsException
from .forms import GenericForm, get_schema, nest_bilingual, validate_values
from .forms.presets import LOCALIZED_LISTS, SCHEMAS
from .i18n import initialize
from .log import setup as setup_log

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Config:
    """Load the config file when it exists, otherwise fall back to defaults."""
    if Path(config_path).exists():
        return Config.load_from_file(config_path)
    logger.debug(f"Configuration file not found, using defaults: {config_path}")
    return Config()


def read_json(path: str) -> dict:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {path}: {e}")
    if not isinstance(data, dict):
        raise click.ClickException(f"Expected a JSON object in {path}")
    return data


@click.group()
@click.option("--config", "-c", default="config.toml", help="Configuration file path")
@click.pass_context
def cli(ctx, config: str):
    """medcms - schema-driven admin forms and post content tools."""
    ctx.ensure_object(dict)
    try:
        cfg = load_config(config)
    except MedcmsException as e:
        raise click.ClickException(str(e))
    ctx.obj["config"] = cfg
    setup_log(cfg.log_file, debug=cfg.web.debug)
    initialize(ui_language=cfg.language.value)


@cli.command(name="forms")
def list_forms():
    """List the available form schemas."""
    for name in sorted(SCHEMAS):
        click.echo(name)


@cli.command(name="schema")
@click.argument("name")
@click.option(
    "--options",
    "options_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file mapping field keys to [{value, label}] select options",
)
@click.pass_context
def show_schema(ctx, name: str, options_file: str | None):
    """Print the widget layout inferred for form NAME."""
    cfg = ctx.obj["config"]
    try:
        form = GenericForm(
            get_schema(name),
            on_submit=lambda data: None,
            select_options=read_json(options_file) if options_file else None,
            config=cfg.forms,
        )
    except MedcmsException as e:
        raise click.ClickException(str(e))
    click.echo(form.layout().model_dump_json(indent=2))


@cli.command(name="validate")
@click.argument("name")
@click.argument("values_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--nest/--no-nest", default=False, help="Fold En/Ar field pairs into {en, ar}")
def validate(name: str, values_file: str, nest: bool):
    """Validate the JSON values in VALUES_FILE against form NAME."""
    try:
        schema = get_schema(name)
        data, errors = validate_values(schema, read_json(values_file))
        if errors:
            raise FormValidationError(errors)
    except FormValidationError as e:
        logger.info(f"Validation failed for {values_file}")
        raise click.ClickException(str(e))
    except MedcmsException as e:
        raise click.ClickException(str(e))

    if nest:
        data = nest_bilingual(data, localized_lists=LOCALIZED_LISTS.get(name, ()))
    click.echo(json.dumps(data, ensure_ascii=False, indent=2, default=str))


@cli.command(name="serve")
@click.option("--host", "-h", default=None, help="Override host from config")
@click.option("--port", "-p", default=None, type=int, help="Override port from config")
@click.pass_context
def serve(ctx, host, port):
    """Start the HTTP API."""
    import uvicorn

    from .api import create_app

    cfg = ctx.obj["config"]
    host = host or cfg.web.host
    port = port or cfg.web.port

    logger.info(f"Starting web service on http://{host}:{port}")
    uvicorn.run(create_app(cfg), host=host, port=port, log_level="debug" if cfg.web.debug else "info")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
