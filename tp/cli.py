"""Command-line interface."""

import click


@click.group()
@click.version_option(package_name="text-patterns")
def cli():
    """Text patterns - concentric squares and right triangles."""
    pass


# Import and register commands from modules
from tp.commands.square import square
from tp.commands.triangle import triangle

cli.add_command(square)
cli.add_command(triangle)


if __name__ == "__main__":
    cli()
