"""Display utilities - console and program headers."""

from rich.console import Console

console = Console()


def print_title(title: str, underline: str = "="):
    """Print a program title with a rule of matching width."""
    console.print(title, markup=False, highlight=False)
    console.print(underline * len(title), markup=False, highlight=False)
