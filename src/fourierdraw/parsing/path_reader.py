"""Read drawn paths from JSON and CSV files."""

import csv
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fourierdraw import PathParseError
from fourierdraw.models import DrawnPath, Point


class PathReader:
    """Load a :class:`DrawnPath` from disk.

    Supported layouts:
        JSON: ``[{"x": 1, "y": 2}, ...]``, ``[[1, 2], ...]`` or
        ``{"points": [...]}`` with either point form
        CSV: two columns ``x,y`` with an optional header row
    """

    def read(self, path: Path | str) -> DrawnPath:
        """Read a path file, choosing the format from its suffix.

        Args:
            path: File to read

        Returns:
            DrawnPath: Points in file order

        Raises:
            PathParseError: If the file is missing, unsupported or malformed
        """
        path = Path(path)
        if not path.exists():
            raise PathParseError(f"Path file not found: {path}")

        suffix = path.suffix.lower()
        if suffix == ".json":
            return self.read_json(path)
        elif suffix == ".csv":
            return self.read_csv(path)
        else:
            raise PathParseError(f"Unsupported path file format: {suffix or path.name}")

    def read_json(self, path: Path) -> DrawnPath:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PathParseError(f"Invalid JSON in {path}: {e}") from e

        if isinstance(data, dict):
            if "points" not in data:
                raise PathParseError(f"JSON object in {path} has no 'points' key")
            data = data["points"]

        if not isinstance(data, list):
            raise PathParseError(f"Expected a list of points in {path}")

        return DrawnPath(points=[self._parse_point(item, i) for i, item in enumerate(data)])

    def read_csv(self, path: Path) -> DrawnPath:
        points = []
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                if not row or not "".join(row).strip():
                    continue
                if len(row) < 2:
                    raise PathParseError(f"{path}:{line_no}: expected two columns, got {len(row)}")
                try:
                    x, y = float(row[0]), float(row[1])
                except ValueError:
                    # Header row
                    if line_no == 1:
                        continue
                    raise PathParseError(f"{path}:{line_no}: not a number: {row[:2]}")
                points.append(Point(x=x, y=y))
        return DrawnPath(points=points)

    def _parse_point(self, item: Any, index: int) -> Point:
        try:
            if isinstance(item, dict):
                return Point.model_validate(item)
            if isinstance(item, (list, tuple)) and len(item) == 2:
                return Point(x=item[0], y=item[1])
        except ValidationError as e:
            raise PathParseError(f"Invalid point at index {index}: {e}") from e
        raise PathParseError(f"Invalid point at index {index}: {item!r}")
