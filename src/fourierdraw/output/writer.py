"""Output writing for coefficient sets in various formats."""

import json
from pathlib import Path
from typing import Literal

from fourierdraw.models import CoefficientSet


class CoefficientWriter:
    """Write coefficient sets in various formats.

    Supports JSON, text, and markdown output formats.
    """

    def write(
        self,
        coefficients: CoefficientSet,
        output_path: Path | str,
        format: Literal["json", "text", "markdown"] = "json",
    ) -> Path:
        """Write coefficients to file in specified format.

        Args:
            coefficients: Coefficient set to write
            output_path: Path to output file
            format: Output format (json, text, or markdown)

        Returns:
            Path: Path to written file
        """
        output_path = Path(output_path)

        if format == "json":
            return self.write_json(coefficients, output_path)
        elif format == "text":
            return self.write_text(coefficients, output_path)
        elif format == "markdown":
            return self.write_markdown(coefficients, output_path)
        else:
            raise ValueError(f"Unsupported format: {format}")

    def to_dict(self, coefficients: CoefficientSet) -> dict:
        return {
            "path_length": coefficients.path_length,
            "origin": {"x": coefficients.origin[0], "y": coefficients.origin[1]},
            "radius_sum": coefficients.radius_sum,
            "coefficients": [c.model_dump() for c in coefficients],
        }

    def write_json(self, coefficients: CoefficientSet, output_path: Path) -> Path:
        """Write coefficients as JSON.

        Args:
            coefficients: Coefficient set to write
            output_path: Output file path

        Returns:
            Path: Path to written file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(coefficients), f, indent=2)

        return output_path

    def write_text(self, coefficients: CoefficientSet, output_path: Path) -> Path:
        """Write coefficients as a fixed-width table."""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        lines = []
        lines.append("=" * 60)
        lines.append("FOURIER COEFFICIENTS")
        lines.append("=" * 60)
        lines.append("")
        lines.append(f"Path length: {coefficients.path_length}")
        lines.append(f"Origin: ({coefficients.origin[0]:g}, {coefficients.origin[1]:g})")
        lines.append(f"Coefficients: {len(coefficients)}")
        lines.append(f"Radius sum: {coefficients.radius_sum:.6f}")
        lines.append("")
        lines.append("-" * 60)
        lines.append(f"{'rank':>4} {'freq':>5} {'amp':>12} {'phase':>10} {'re':>12} {'im':>12}")

        for rank, c in enumerate(coefficients, start=1):
            lines.append(
                f"{rank:>4} {c.freq:>5} {c.amp:>12.6f} {c.phase:>10.6f} {c.re:>12.6f} {c.im:>12.6f}"
            )

        lines.append("=" * 60)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        return output_path

    def write_markdown(self, coefficients: CoefficientSet, output_path: Path) -> Path:
        """Write coefficients as a markdown table."""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        lines = []
        lines.append("# Fourier Coefficients")
        lines.append("")
        lines.append(f"**Path length:** {coefficients.path_length}  ")
        lines.append(f"**Coefficients:** {len(coefficients)}  ")
        lines.append(f"**Radius sum:** {coefficients.radius_sum:.6f}")
        lines.append("")
        lines.append("| Rank | Freq | Amplitude | Phase | Re | Im |")
        lines.append("|---:|---:|---:|---:|---:|---:|")

        for rank, c in enumerate(coefficients, start=1):
            lines.append(
                f"| {rank} | {c.freq} | {c.amp:.6f} | {c.phase:.6f} | {c.re:.6f} | {c.im:.6f} |"
            )

        lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        return output_path
