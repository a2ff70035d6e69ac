"""Terminal preview for coefficient sets using Rich."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fourierdraw.models import CoefficientSet


class CoefficientPreview:
    """Show a coefficient set in the terminal."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize terminal preview.

        Args:
            console: Rich console to use (creates new if None)
        """
        self.console = console or Console()

    def show(
        self,
        coefficients: CoefficientSet,
        limit: Optional[int] = None,
        error: Optional[float] = None,
    ) -> None:
        """Show header panel and the ranked coefficient table.

        Args:
            coefficients: Coefficient set to preview
            limit: Show only the first ``limit`` rows
            error: RMS reconstruction error to report, if known
        """
        summary = (
            f"[bold cyan]Fourier Coefficients[/bold cyan]\n\n"
            f"Samples (N): [bold]{coefficients.path_length}[/bold]\n"
            f"Terms (K): [bold]{len(coefficients)}[/bold]\n"
            f"Radius sum: [bold]{coefficients.radius_sum:.4f}[/bold]\n"
        )
        if error is not None:
            summary += f"RMS error: [bold]{error:.4f}[/bold]\n"
        summary += f"Origin: [dim]({coefficients.origin[0]:g}, {coefficients.origin[1]:g})[/dim]"

        self.console.print()
        self.console.print(
            Panel.fit(
                summary,
                border_style="cyan",
                title="[bold]fourierdraw[/bold]",
            )
        )

        table = Table(show_header=True, header_style="bold")
        table.add_column("Rank", justify="right", style="dim")
        table.add_column("Freq", justify="right", style="cyan")
        table.add_column("Amplitude", justify="right")
        table.add_column("Phase", justify="right")
        table.add_column("Re", justify="right", style="dim")
        table.add_column("Im", justify="right", style="dim")

        rows = coefficients.coefficients if limit is None else coefficients.coefficients[:limit]
        for rank, c in enumerate(rows, start=1):
            table.add_row(
                str(rank),
                str(c.freq),
                f"{c.amp:.4f}",
                f"{c.phase:.4f}",
                f"{c.re:.4f}",
                f"{c.im:.4f}",
            )

        self.console.print(table)
        if limit is not None and limit < len(coefficients):
            self.console.print(f"[dim]... {len(coefficients) - limit} more[/dim]")
