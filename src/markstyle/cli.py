"""Command-line interface for inspecting markdown styles."""

import logging

import typer
from rich.console import Console
from rich.table import Table

from markstyle import __version__
from markstyle.config import get_settings
from markstyle.core.style import MarkdownStyle, inline_style
from markstyle.formatting.attributes import StyleAttributes
from markstyle.formatting.tags import MarkdownTag, VALID_VALUES

app = typer.Typer(
    name="markstyle",
    help="Resolve markdown tags to the text attributes they are rendered with.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"markstyle v{__version__}")
        raise typer.Exit()


def build_style(inline: bool) -> MarkdownStyle:
    """Build the style to resolve against from the current settings."""
    settings = get_settings()
    if inline:
        return inline_style(settings)
    return MarkdownStyle.from_settings(settings)


def format_paragraph(attrs: StyleAttributes) -> str:
    """Describe the paragraph style of resolved attributes."""
    if attrs.paragraph_style is None:
        return "-"
    return f"indent {attrs.paragraph_style.leftIndent:g}"


def format_color(attrs: StyleAttributes) -> str:
    if attrs.foreground_color is None:
        return "-"
    return attrs.foreground_color.hexval()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Inspect how markdown tags map to fonts, colors and paragraph styles."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def resolve(
    tags: list[str] = typer.Argument(
        ...,
        help="Tag names to combine, e.g. 'list bold' or 'header1'",
    ),
    inline: bool = typer.Option(
        False,
        "--inline",
        "-i",
        help="Use the inline style (headers at body size)",
    ),
) -> None:
    """
    Resolve a combination of tags and print its attributes.

    Examples:

        markstyle resolve bold italic

        markstyle resolve list-code

        markstyle resolve header1 --inline
    """
    try:
        markdown = MarkdownTag.from_names(*tags)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    attrs = build_style(inline).attributes_for(markdown)

    table = Table(title=f"Attributes for {markdown.describe()}")
    table.add_column("Attribute", style="bold")
    table.add_column("Value")
    table.add_row("Requested", markdown.describe())
    table.add_row("Valid", "yes" if markdown.is_valid else "no")
    table.add_row("Resolved", attrs.markdown.describe())
    table.add_row("Font", str(attrs.font))
    table.add_row("Color", format_color(attrs))
    table.add_row("Paragraph", format_paragraph(attrs))
    console.print(table)


@app.command("table")
def show_table(
    inline: bool = typer.Option(
        False,
        "--inline",
        "-i",
        help="Use the inline style (headers at body size)",
    ),
) -> None:
    """Print the attributes resolved for every valid tag."""
    style = build_style(inline)

    table = Table(title="Markdown styles")
    table.add_column("Tag", style="bold")
    table.add_column("Resolved")
    table.add_column("Font")
    table.add_column("Color")
    table.add_column("Paragraph")

    for markdown in (MarkdownTag.NONE,) + VALID_VALUES:
        attrs = style.attributes_for(markdown)
        table.add_row(
            markdown.describe(),
            attrs.markdown.describe(),
            str(attrs.font),
            format_color(attrs),
            format_paragraph(attrs),
        )

    console.print(table)


if __name__ == "__main__":
    app()
