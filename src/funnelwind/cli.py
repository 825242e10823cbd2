"""
FunnelWind command line interface.

    funnelwind render page.html -s styleguide.json -o out.html
    funnelwind css styleguide.json
    funnelwind typescale --base-size 18 --ratio 1.333
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from funnelwind import __version__
from funnelwind.config import FunnelWindConfig, load_config
from funnelwind.errors import ErrorContext, FunnelWindError, MarkupError
from funnelwind.logging import setup_logging
from funnelwind.pipeline import RenderOptions, build_stylesheet, render_document, render_markup
from funnelwind.render.context import RenderContext
from funnelwind.specs.styleguide import TypographySpec
from funnelwind.styleguide.css_generator import generate_styleguide_css
from funnelwind.styleguide.loader import load_brand_assets_file, load_styleguide_file
from funnelwind.styleguide.store import StyleguideStore
from funnelwind.styleguide.typescale import ELEMENT_TYPES, build_typescale

app = typer.Typer(
    name="funnelwind",
    help="Render cf-* tag markup into ClickFunnels-compatible HTML.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _fail(error: FunnelWindError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {error}")
    return typer.Exit(1)


def _prepare(config_path: Path | None, log_level: str | None) -> FunnelWindConfig:
    config = load_config(config_path)
    setup_logging(
        log_level or config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json,
    )
    return config


def read_markup(path: Path) -> str:
    """Read an input document as UTF-8."""
    if not path.exists():
        raise MarkupError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MarkupError(f"Input is not valid UTF-8: {e}", ErrorContext(file=path)) from e


@app.command()
def render(
    input_file: Path = typer.Argument(..., help="Markup file containing cf-* tags"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write HTML here instead of stdout"),
    styleguide: Path | None = typer.Option(
        None, "--styleguide", "-s", help="Styleguide JSON or YAML file"
    ),
    brand_assets: Path | None = typer.Option(
        None, "--brand-assets", "-b", help="Brand assets JSON or YAML file"
    ),
    fragment: bool = typer.Option(
        False, "--fragment", help="Emit only the rendered markup, without a page shell"
    ),
    title: str | None = typer.Option(None, "--title", help="Document title"),
    no_css: bool = typer.Option(False, "--no-css", help="Do not include the generated stylesheet"),
    no_fonts: bool = typer.Option(False, "--no-fonts", help="Do not link Google Fonts"),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on malformed styleguide or brand assets"
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to funnelwind.toml"),
    log_level: str | None = typer.Option(None, "--log-level", help="Override the log level"),
) -> None:
    """Render a markup file."""
    try:
        config = _prepare(config_path, log_level)
        markup = read_markup(input_file)

        styleguide_path = styleguide or config.render.styleguide
        assets_path = brand_assets or config.render.brand_assets
        styleguide_spec = (
            load_styleguide_file(styleguide_path, strict=strict) if styleguide_path else None
        )
        assets_spec = load_brand_assets_file(assets_path, strict=strict) if assets_path else None

        options = RenderOptions(
            inject_css=config.render.inject_css and not no_css,
            load_fonts=config.render.load_fonts and not no_fonts,
            strict=strict,
        )
        result = render_markup(markup, styleguide_spec, assets_spec, options)
    except FunnelWindError as e:
        raise _fail(e) from e

    html = (
        result.html
        if fragment
        else render_document(result, title=title or config.render.document_title)
    )

    if output is None:
        typer.echo(html)
        return

    output.write_text(html, encoding="utf-8")
    err_console.print(
        f"[green]Rendered {result.report.total} tag(s)[/green] -> {output}"
        + (f" [yellow](unknown: {', '.join(result.unknown_tags)})[/yellow]" if result.unknown_tags else "")
    )


@app.command()
def css(
    styleguide: Path = typer.Argument(..., help="Styleguide JSON or YAML file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write CSS here instead of stdout"),
    with_backgrounds: bool = typer.Option(
        False, "--with-backgrounds", help="Prepend the background style classes"
    ),
) -> None:
    """Generate the stylesheet for a styleguide."""
    try:
        spec = load_styleguide_file(styleguide, strict=True)
    except FunnelWindError as e:
        raise _fail(e) from e

    store = StyleguideStore(spec)
    if with_backgrounds:
        stylesheet = build_stylesheet(RenderContext(styleguide=store))
    else:
        stylesheet = generate_styleguide_css(store)

    if output is None:
        typer.echo(stylesheet, nl=False)
    else:
        output.write_text(stylesheet, encoding="utf-8")
        err_console.print(f"[green]Wrote stylesheet[/green] -> {output}")


@app.command()
def typescale(
    styleguide: Path | None = typer.Argument(None, help="Styleguide whose typography to use"),
    base_size: float | None = typer.Option(None, "--base-size", help="Base font size in px"),
    ratio: float | None = typer.Option(None, "--ratio", help="Scale ratio between steps"),
) -> None:
    """Show the computed type scale."""
    try:
        spec = load_styleguide_file(styleguide, strict=True) if styleguide else None
    except FunnelWindError as e:
        raise _fail(e) from e

    typography = (spec.typography if spec else None) or TypographySpec()
    overrides = {}
    if base_size is not None:
        overrides["base_size"] = base_size
    if ratio is not None:
        overrides["scale_ratio"] = ratio
    if overrides:
        try:
            typography = TypographySpec(**{**typography.model_dump(), **overrides})
        except ValidationError as e:
            err_console.print(f"[red]Error:[/red] invalid typography: {e.errors()[0]['msg']}")
            raise typer.Exit(1) from e

    tables = build_typescale(typography)
    table = Table(
        title=f"Type scale (base {typography.base_size}px, ratio {typography.scale_ratio})"
    )
    table.add_column("Preset", style="cyan")
    for element_type in ELEMENT_TYPES:
        table.add_column(element_type.capitalize(), justify="right")
    for preset in tables["headline"]:
        table.add_row(preset, *(tables[element_type][preset] for element_type in ELEMENT_TYPES))
    console.print(table)


@app.command()
def version() -> None:
    """Show the FunnelWind version."""
    typer.echo(f"funnelwind {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
