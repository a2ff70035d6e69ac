"""Data models for drawn paths."""

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """Single sample of a drawn path in canvas coordinates.

    Attributes:
        x: Horizontal canvas coordinate
        y: Vertical canvas coordinate
    """

    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class DrawnPath(BaseModel):
    """Ordered sequence of sampled points.

    Insertion order is the sampling order. An empty path is allowed here so
    that a capture collaborator can start from nothing; the transform rejects
    it.

    Attributes:
        points: Samples in the order they were captured
    """

    points: list[Point] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def append(self, x: float, y: float) -> None:
        """Append a sample to the end of the path."""
        self.points.append(Point(x=x, y=y))

    @classmethod
    def from_xy(cls, pairs) -> "DrawnPath":
        """Build a path from an iterable of (x, y) pairs."""
        return cls(points=[Point(x=x, y=y) for x, y in pairs])
