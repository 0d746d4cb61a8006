"""Reading the size parameter and showing patterns."""

import re
from typing import Callable, Iterable, Iterator

import click
from rich.prompt import Prompt

from tp.errors import InvalidInputError, SizeParseError
from tp.utils.display import console, print_title

_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_size(raw: str) -> int:
    """Parse the integer at the start of the first token of raw.

    Trailing characters after the digits are ignored, so "4abc" and "4.5"
    both give 4. Range is not checked here; the renderers reject n <= 0.
    """
    tokens = (raw or "").split()
    match = _LEADING_INTEGER.match(tokens[0]) if tokens else None
    if match is None:
        raise SizeParseError(raw)
    return int(match.group())


def read_size(prompt: str) -> int:
    """Prompt on the console and parse the reply, raising SizeParseError.

    Blank replies are skipped and the next line is read. End of input
    counts as a parse failure.
    """
    try:
        raw = Prompt.ask(prompt, console=console)
        while not raw.strip():
            raw = console.input()
    except EOFError:
        raise SizeParseError("") from None
    return parse_size(raw)


def show_rows(rows: Iterable[str]):
    """Write pattern rows exactly as rendered, trailing spaces included."""
    for row in rows:
        click.echo(row)


def show_pattern(iter_rows: Callable[[int], Iterator[str]], n: int) -> bool:
    """Stream a pattern row by row. Invalid sizes are reported, not raised."""
    try:
        rows = iter_rows(n)
    except InvalidInputError as e:
        console.print(f"[red]{e.message}[/red]")
        return False
    show_rows(rows)
    return True


def show_examples(iter_rows: Callable[[int], Iterator[str]], sizes: Iterable[int]):
    """Print the example section that follows the user's own pattern."""
    console.print()
    console.print()
    print_title("Examples of other sizes:", underline="-")
    console.print()
    for index, size in enumerate(sizes):
        if index:
            console.print()
        console.print(f"n = {size}:", highlight=False)
        show_pattern(iter_rows, size)
