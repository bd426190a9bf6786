import json
import logging

import click

from . import __version__
from .cli_utils import reconstruct_command_line
from .pipeline import CodeGeneratorConfig, OutputMode, generate


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True), help="JSON config file")
@click.option("--base-module", default=None, type=str, help="Module providing the model base class")
@click.option("--base-class", default=None, type=str, help="Name of the model base class")
@click.option(
    "--force/--no-force",
    default=None,
    help="Overwrite existing model files (default) or fail the definitions whose file exists",
)
@click.option("--fail-fast", is_flag=True, default=False, help="Stop at the first definition that fails")
@click.option("--format", "format_code", is_flag=True, default=False, help="Format generated code with black")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.version_option(__version__)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def json_schema_to_model(config, base_module, base_class, force, fail_fast, format_code, verbose, path, output):
    """Generate one model class per definition of the schema at PATH into the OUTPUT directory."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if base_module is not None:
        config.base.module = base_module
    if base_class is not None:
        config.base.class_name = base_class
    if force is not None:
        config.output.mode = OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS
    if fail_fast:
        config.fail_fast = True
    if format_code:
        config.formatter.enabled = True

    generation_comment = [
        f"Generated by json_schema_to_model {__version__}, do not edit by hand.",
        reconstruct_command_line(json_schema_to_model),
    ]

    status = generate(path, output, config, generation_comment)
    if status != 0:
        click.echo("Model generation failed, see the errors above.", err=True)
    click.get_current_context().exit(status)
