# ABOUTME: CLI package for cnemeta, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from cnemeta.cli.commands import add_cmd, edit_cmd, export_cmd, ls_cmd, show_cmd


@click.group()
@click.version_option(package_name="cnemeta")
def cli() -> None:
    """cnemeta - non-English citation metadata kept in a record's extra field."""


cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(show_cmd.show)
cli.add_command(edit_cmd.set_variant)
cli.add_command(edit_cmd.lang)
cli.add_command(edit_cmd.author)
cli.add_command(edit_cmd.clear)
cli.add_command(export_cmd.export)
