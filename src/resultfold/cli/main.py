"""
Main CLI entry point for resultfold.

Defines the root command group and registers all subcommands.
Uses Click framework for argument parsing and help generation.
"""

import logging

import click
from typing import Optional

from resultfold import __version__


CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    max_content_width=120,
)


class AliasedGroup(click.Group):
    """
    Click group that accepts unambiguous command prefixes and treats
    underscores and hyphens as the same character.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        normalized_name = cmd_name.replace("_", "-")

        rv = click.Group.get_command(self, ctx, normalized_name)
        if rv is not None:
            return rv

        matches = [x for x in self.list_commands(ctx) if x.startswith(normalized_name)]
        if not matches:
            return None
        elif len(matches) == 1:
            return click.Group.get_command(self, ctx, matches[0])
        else:
            ctx.fail(f"Ambiguous command '{cmd_name}': could be {', '.join(sorted(matches))}")
            return None


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-V", "--version", prog_name="resultfold")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output with detailed logging.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    help="Suppress all output except results and errors.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """
    resultfold: collapse a batch of fallible outcomes.

    \b
    Commands:
      fold  - parse delimited integers and fold the outcomes
      info  - show version and environment information

    For detailed help on any command, use: resultfold <command> --help
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    if verbose and not quiet:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    elif quiet:
        logging.basicConfig(level=logging.ERROR)


from resultfold.cli.fold import fold

cli.add_command(fold)


@cli.command()
def info() -> None:
    """
    Display version and environment information.
    """
    import sys
    import platform
    from importlib import metadata

    click.echo(f"resultfold version: {__version__}")
    click.echo(f"Python version: {sys.version}")
    click.echo(f"Platform: {platform.platform()}")

    click.echo("\nInstalled dependencies:")
    for name in ("click", "pandas", "PyYAML"):
        try:
            click.echo(f"  {name}: {metadata.version(name)}")
        except metadata.PackageNotFoundError:
            click.echo(f"  {name}: not installed")


if __name__ == "__main__":
    cli()
