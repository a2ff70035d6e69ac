"""Command-line interface for fourierdraw."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from fourierdraw import ConfigurationError, FourierDrawError, __version__
from fourierdraw.animation import Approximator, ImmediateScheduler, MatplotlibScheduler
from fourierdraw.config import FourierDrawSettings, get_config
from fourierdraw.models import AnimationFrame
from fourierdraw.output.writer import CoefficientWriter
from fourierdraw.parsing.path_reader import PathReader
from fourierdraw.preview.terminal import CoefficientPreview
from fourierdraw.transform import canvas_origin, compute_coefficients, reconstruction_error

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _settings(
    width: Optional[int] = None,
    height: Optional[int] = None,
    num_coefficients: Optional[int] = None,
) -> FourierDrawSettings:
    """Load config and apply command-line overrides."""
    overrides = {
        "canvas_width": width,
        "canvas_height": height,
        "num_coefficients": num_coefficients,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        config = get_config()
        if not overrides:
            return config
        return FourierDrawSettings(**{**config.model_dump(), **overrides})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _fail(title: str, error: Exception) -> None:
    console.print()
    console.print(
        Panel.fit(
            f"[red]Error:[/red] {error}",
            border_style="red",
            title=f"[bold red]{title}[/bold red]",
        )
    )
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """fourierdraw - Redraw curves with epicycles.

    A truncated Fourier series, one rotating vector per term.
    """
    _configure_logging(verbose)


@main.command()
@click.argument("path_file", type=click.Path(exists=True, path_type=Path))
@click.option("--num-coefficients", "-k", type=int, default=None, help="Number of terms (default: from config)")
@click.option("--width", type=int, default=None, help="Canvas width (default: from config)")
@click.option("--height", type=int, default=None, help="Canvas height (default: from config)")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["json", "text", "markdown"]),
    default=None,
    help="Output format when writing to a file (default: from config)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Write coefficients to this file",
)
@click.option("--limit", "-n", type=int, default=20, help="Rows shown in the preview table")
def coefficients(
    path_file: Path,
    num_coefficients: Optional[int],
    width: Optional[int],
    height: Optional[int],
    format: Optional[str],
    output: Optional[Path],
    limit: int,
):
    """Compute and show the Fourier coefficients of a path.

    PATH_FILE: JSON or CSV file of (x, y) samples in canvas coordinates
    """
    try:
        settings = _settings(width, height, num_coefficients)
        path = PathReader().read(path_file)
        coeffs = compute_coefficients(
            path,
            settings.num_coefficients,
            origin=canvas_origin(settings.canvas_width, settings.canvas_height),
        )
        CoefficientPreview(console).show(
            coeffs, limit=limit, error=reconstruction_error(path, coeffs)
        )

        if output:
            output_format = format or settings.output_format
            written = CoefficientWriter().write(coeffs, output, format=output_format)
            console.print(f"\n[green]Wrote[/green] {written}")
    except FourierDrawError as e:
        _fail("Transform Failed", e)


@main.command()
@click.argument("path_file", type=click.Path(exists=True, path_type=Path))
@click.option("--num-coefficients", "-k", type=int, default=None, help="Number of terms (default: from config)")
@click.option("--width", type=int, default=None, help="Canvas width (default: from config)")
@click.option("--height", type=int, default=None, help="Canvas height (default: from config)")
@click.option(
    "--save",
    type=click.Path(path_type=Path),
    default=None,
    help="Save the animation (.gif via Pillow) instead of showing it",
)
@click.option("--fps", type=int, default=30, help="Frames per second when saving")
def animate(
    path_file: Path,
    num_coefficients: Optional[int],
    width: Optional[int],
    height: Optional[int],
    save: Optional[Path],
    fps: int,
):
    """Animate the epicycle reconstruction of a path.

    PATH_FILE: JSON or CSV file of (x, y) samples in canvas coordinates
    """
    import matplotlib

    if save:
        matplotlib.use("Agg")

    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation, PillowWriter

    from fourierdraw.rendering import render_frame
    from fourierdraw.rendering.matplotlib_surface import MatplotlibSurface

    try:
        settings = _settings(width, height, num_coefficients)
        path = PathReader().read(path_file)
        surface = MatplotlibSurface.create(settings.canvas_width, settings.canvas_height)

        if save:
            frames: list[AnimationFrame] = []
            Approximator(ImmediateScheduler(), settings=settings).approximate(
                path, on_frame=frames.append
            )

            def update(i: int):
                render_frame(surface, frames[i])
                return []

            anim = FuncAnimation(surface.figure, update, frames=len(frames), blit=False)
            save.parent.mkdir(parents=True, exist_ok=True)
            anim.save(str(save), writer=PillowWriter(fps=fps))
            plt.close(surface.figure)
            console.print(f"[green]Saved[/green] {len(frames)} frames to {save}")
        else:
            approximator = Approximator(
                MatplotlibScheduler(surface.figure.canvas, settings.frame_interval_ms),
                surface=surface,
                settings=settings,
            )
            approximator.approximate(path)
            plt.show()
    except FourierDrawError as e:
        _fail("Animation Failed", e)


@main.command()
@click.option("--num-coefficients", "-k", type=int, default=None, help="Initial number of terms")
@click.option("--width", type=int, default=None, help="Canvas width (default: from config)")
@click.option("--height", type=int, default=None, help="Canvas height (default: from config)")
def draw(num_coefficients: Optional[int], width: Optional[int], height: Optional[int]):
    """Open an interactive canvas: draw, pick the terms, approximate."""
    from fourierdraw.capture.canvas import DrawingCanvas

    try:
        settings = _settings(width, height, num_coefficients)
        DrawingCanvas(settings).show()
    except FourierDrawError as e:
        _fail("Canvas Failed", e)


@main.command("config-show")
def config_show():
    """Show current configuration."""
    try:
        config = _settings()
    except FourierDrawError as e:
        _fail("Configuration Error", e)
        return

    console.print(Panel.fit("[bold cyan]fourierdraw Configuration[/bold cyan]", border_style="cyan"))
    console.print()
    console.print(f"[cyan]Coefficients:[/cyan] {config.num_coefficients}")
    console.print(f"[cyan]Max Coefficients:[/cyan] {config.max_coefficients}")
    console.print(f"[cyan]Canvas:[/cyan] {config.canvas_width}x{config.canvas_height}")
    console.print(f"[cyan]Padding:[/cyan] {config.padding}")
    console.print(f"[cyan]Frame Interval:[/cyan] {config.frame_interval_ms} ms")
    console.print(f"[cyan]Output Format:[/cyan] {config.output_format}")


if __name__ == "__main__":
    main()
