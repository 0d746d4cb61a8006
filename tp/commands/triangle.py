"""Right triangle command."""

import click

from tp.errors import SizeParseError
from tp.utils.display import console


@click.command("triangle")
@click.pass_context
def triangle(ctx):
    """Print a right triangle of asterisks with height n."""
    from tp.config import TRIANGLE_EXAMPLE_SIZES, TRIANGLE_PROMPT, TRIANGLE_TITLE
    from tp.patterns import triangle as pattern
    from tp.utils.display import print_title
    from tp.utils.prompting import read_size, show_examples, show_pattern

    print_title(TRIANGLE_TITLE)
    console.print()

    try:
        n = read_size(TRIANGLE_PROMPT)
    except SizeParseError as e:
        console.print(f"[red]{e.message}[/red]")
        ctx.exit(1)

    console.print()
    show_pattern(pattern.iter_rows, n)

    show_examples(pattern.iter_rows, TRIANGLE_EXAMPLE_SIZES)
