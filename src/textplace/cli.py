"""CLI interface for placing text on images."""

import logging
from pathlib import Path

import click

from textplace.api.builder import place_text, prepare_lines
from textplace.config import Config, FontConfig, Placement, load_config, parse_color
from textplace.fonts import FontContext, Scale
from textplace.render.image import blank_canvas, load_image, save_image
from textplace.types import Wrap


def _parse_size(value: str) -> tuple[int, int]:
    """Parse a canvas size given as WIDTHxHEIGHT."""
    try:
        width_str, height_str = value.lower().split("x")
        width, height = int(width_str), int(height_str)
    except ValueError as e:
        raise ValueError(f"Invalid canvas size '{value}', expected WIDTHxHEIGHT (e.g. 800x600)") from e
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got '{value}'")
    return width, height


def _build_font_context(font_config: FontConfig) -> FontContext:
    scale = Scale(x=font_config.scale_x or font_config.size, y=font_config.size)
    if font_config.path is None:
        return FontContext.default(scale, font_config.color)
    return FontContext.from_file(font_config.path, scale, font_config.color)


def _font_overrides(font: Path | None, size: float | None, scale_x: float | None) -> dict:
    overrides: dict = {}
    if font is not None:
        overrides["path"] = font
    if size is not None:
        overrides["size"] = size
    if scale_x is not None:
        overrides["scale_x"] = scale_x
    return overrides


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log layout and wrap decisions.")
def main(verbose: bool) -> None:
    """Place justified, anchored, and wrapped text on images."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("image", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output image path. The format follows the extension.",
)
@click.option("-t", "--text", help="Text to place. Quote a multi-line string or use --text-file for several lines.")
@click.option(
    "--text-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the text to place from a file.",
)
@click.option("-x", "x", type=int, default=0, help="Anchor x-coordinate in pixels.")
@click.option("-y", "y", type=int, default=0, help="Anchor y-coordinate in pixels.")
@click.option(
    "--justify",
    type=click.Choice(["left", "center", "right"], case_sensitive=False),
    help="Horizontal justification relative to x (default: center).",
)
@click.option(
    "--anchor",
    type=click.Choice(["top", "center", "bottom"], case_sensitive=False),
    help="Where the text block sits relative to y (default: center).",
)
@click.option("--wrap", "wrap_width", type=int, help="Wrap lines wider than this many pixels.")
@click.option(
    "--font",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TrueType/OpenType font file. Defaults to the font bundled with Pillow.",
)
@click.option("--size", type=float, help="Font scale in pixels (default: 40).")
@click.option("--scale-x", type=float, help="Horizontal font scale in pixels (default: same as --size).")
@click.option("--color", type=str, help="Text color as '#rrggbb[aa]' or 'r,g,b[,a]'.")
@click.option("--canvas", "canvas_size", type=str, default="800x600", help="Blank canvas size when no IMAGE is given.")
@click.option("--background", type=str, default="255,255,255", help="Blank canvas color when no IMAGE is given.")
@click.option("--debug", is_flag=True, help="Mark the anchor point with a red cross.")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a textplace.toml file. Command-line options override it.",
)
def render(
    image: Path | None,
    output: Path,
    text: str | None,
    text_file: Path | None,
    x: int,
    y: int,
    justify: str | None,
    anchor: str | None,
    wrap_width: int | None,
    font: Path | None,
    size: float | None,
    scale_x: float | None,
    color: str | None,
    canvas_size: str,
    background: str,
    debug: bool,
    config: Path | None,
) -> None:
    """
    Place text on IMAGE (or on a blank canvas) and save the result.

    Example:

        textplace render background.png -o out.png -x 400 -y 0 --anchor top \\
            -t "This is Line 1
            This is Line 2
            This is a Line with more content."
    """
    try:
        if text is None and text_file is None:
            raise ValueError("Provide the text with --text or --text-file")
        if text is not None and text_file is not None:
            raise ValueError("Use either --text or --text-file, not both")
        if text_file is not None:
            text = text_file.read_text(encoding="utf-8")

        cfg = load_config(config) if config else Config()

        # Build font configuration with CLI option overrides
        font_updates = _font_overrides(font, size, scale_x)
        if color:
            font_updates["color"] = parse_color(color)
        font_config = FontConfig(**{**cfg.font.model_dump(), **font_updates})

        placement_updates: dict = {}
        if justify:
            placement_updates["justify"] = justify.lower()
        if anchor:
            placement_updates["vertical_anchor"] = anchor.lower()
        if wrap_width is not None:
            placement_updates["wrap_width"] = wrap_width
        if debug:
            placement_updates["debug"] = True
        placement = Placement(**{**cfg.placement.model_dump(), **placement_updates})

        font_context = _build_font_context(font_config)
        canvas = load_image(image) if image else blank_canvas(_parse_size(canvas_size), parse_color(background))

        placed = place_text(canvas, text, font_context, x, y, placement)
        save_image(canvas, output)

        click.echo(f"✓ Placed {len(placed)} line(s), saved to: {output}")

    except (FileNotFoundError, ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("text")
@click.option("-w", "--width", "max_width", type=int, required=True, help="Maximum line width in pixels.")
@click.option(
    "--font",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TrueType/OpenType font file. Defaults to the font bundled with Pillow.",
)
@click.option("--size", type=float, help="Font scale in pixels (default: 40).")
@click.option("--scale-x", type=float, help="Horizontal font scale in pixels (default: same as --size).")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a textplace.toml file. Command-line options override it.",
)
def wrap(
    text: str,
    max_width: int,
    font: Path | None,
    size: float | None,
    scale_x: float | None,
    config: Path | None,
) -> None:
    """Print the lines TEXT wraps into, one per line, without drawing."""
    try:
        cfg = load_config(config) if config else Config()
        font_config = FontConfig(**{**cfg.font.model_dump(), **_font_overrides(font, size, scale_x)})
        font_context = _build_font_context(font_config)

        for line in prepare_lines(text, font_context, Wrap(max_width)):
            click.echo(line)

    except (FileNotFoundError, ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
