"""CLI main entry point."""

import logging
from pathlib import Path

import click

from .config import Config, publish_default_config
from .consts import CONFIG_FILE_DEFAULT
from .db import close_db, create_tables, init_db
from .errors import TranslatableFormsException
from .i18n import gettext as _
from .i18n import initialize
from .log import setup as setup_log
from .schema import FormSchema, load_form_schema
from .transformer import SchemaTransformer

logger = logging.getLogger(__name__)


def load_config(config_path: str | None) -> Config:
    """Load the given config file, or the default one when it exists."""
    if config_path is None:
        if not Path(CONFIG_FILE_DEFAULT).is_file():
            logger.debug("No configuration file, using defaults and environment")
            return Config()
        config_path = CONFIG_FILE_DEFAULT

    logger.info(f"Loading configuration file: {config_path}")
    return Config.load_from_file(config_path)


def prepare(ctx) -> Config:
    """Load the configuration and set up logging, --log-file taking precedence."""
    try:
        cfg = load_config(ctx.obj["config_path"])
    except TranslatableFormsException as e:
        raise click.ClickException(str(e))

    setup_log(ctx.obj["log_file"] or cfg.log_file)
    return cfg


@click.group()
@click.option("--config", "-c", default=None, help="Configuration file path")
@click.option("--log-file", default=None, help="Log file path")
@click.pass_context
def cli(ctx, config: str | None, log_file: str | None):
    """Translatable forms - multi-locale form schema tooling."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["log_file"] = log_file


@cli.command(name="publish-config")
@click.option("--path", "-p", default=CONFIG_FILE_DEFAULT, help="Where to write the file")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing file")
@click.pass_context
def publish_config(ctx, path: str, force: bool):
    """Write the default configuration file."""
    setup_log(ctx.obj["log_file"])
    try:
        written = publish_default_config(path, force=force)
    except TranslatableFormsException as e:
        raise click.ClickException(str(e))

    click.echo(_("Configuration published to {path}").format(path=written))


@cli.command(name="init-db")
@click.pass_context
def init_database(ctx):
    """Create the translations table in the configured database."""
    cfg = prepare(ctx)

    init_db(cfg.database_path)
    try:
        create_tables()
    finally:
        close_db()

    click.echo(_("Database initialized at {path}").format(path=cfg.database_path))


@cli.command(name="locales")
@click.pass_context
def list_locales(ctx):
    """Print the resolved form locales, default first."""
    cfg = prepare(ctx)

    initialize(cfg.locale)
    transformer = SchemaTransformer.from_config(cfg)

    click.echo("code\tname")
    for code, name in transformer.get_locales().items():
        click.echo(f"{code}\t{name}")


@cli.command(name="transform")
@click.argument("schema_file", type=click.Path(dir_okay=False))
@click.option(
    "--attribute",
    "-a",
    "attributes",
    multiple=True,
    help="Translatable attribute name (repeatable)",
)
@click.option("--locale", default=None, help="Override the application locale")
@click.pass_context
def transform(ctx, schema_file: str, attributes: tuple[str, ...], locale: str | None):
    """Transform a JSON form schema and print the result."""
    cfg = prepare(ctx)
    try:
        schema = load_form_schema(schema_file)
    except TranslatableFormsException as e:
        raise click.ClickException(str(e))

    initialize(locale or cfg.locale)
    transformer = SchemaTransformer.from_config(cfg)

    if not attributes:
        logger.warning("No translatable attributes given, schema is returned unchanged")

    result = FormSchema(components=transformer.transform(schema.components, attributes))
    click.echo(result.model_dump_json(indent=2))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
