"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

COMMAND_NAME = "json_schema_to_model"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Absolute and existing paths are reduced to their names so that the line
    written into generated files does not depend on where the generator was run.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return COMMAND_NAME

    if not cli_args:
        return COMMAND_NAME

    arguments = []
    options = []

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if not value:
            continue

        if isinstance(value, (str, Path)):
            path_obj = Path(str(value))
            formatted_value = path_obj.name if path_obj.is_absolute() or path_obj.exists() else str(value)
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)

        elif isinstance(param, click.Option):
            # Skip defaults and options that do not change the output
            if value == param.default or param_name == "verbose":
                continue

            flag = param.opts[0] if param.opts else f"--{param_name}"
            if getattr(param, "is_flag", False):
                options.append(flag)
            else:
                options.extend([flag, formatted_value])

    return " ".join([COMMAND_NAME, *arguments, *options])
