"""Concentric square command."""

import click

from tp.errors import SizeParseError
from tp.utils.display import console


@click.command("square")
@click.pass_context
def square(ctx):
    """Print a concentric square pattern of size n."""
    from tp.config import REGION_VIEW_MAX, SQUARE_EXAMPLE_SIZES, SQUARE_PROMPT, SQUARE_TITLE
    from tp.patterns import square as pattern
    from tp.utils.display import print_title
    from tp.utils.prompting import read_size, show_examples, show_pattern, show_rows

    print_title(SQUARE_TITLE)
    console.print()

    try:
        n = read_size(SQUARE_PROMPT)
    except SizeParseError as e:
        console.print(f"[red]{e.message}[/red]")
        ctx.exit(1)

    console.print()

    if n <= REGION_VIEW_MAX:
        console.print("Region visualization (U = Upper-left, L = Lower-right):", highlight=False)
        # a non-positive size has an empty grid, so only the header shows
        if n >= 1:
            show_rows(pattern.region_map(n))
        console.print()

    console.print("Concentric square pattern:")
    show_pattern(pattern.iter_rows, n)

    show_examples(pattern.iter_rows, SQUARE_EXAMPLE_SIZES)
