"""Pointer capture into an ordered path."""

from fourierdraw.models import DrawnPath


class PathRecorder:
    """Collect pointer positions while a button is held down.

    Pressing starts a fresh path, so each stroke replaces the previous one.
    """

    def __init__(self):
        self.path = DrawnPath()
        self.is_drawing = False

    def press(self, x: float, y: float) -> None:
        self.is_drawing = True
        self.path = DrawnPath()
        self.move(x, y)

    def move(self, x: float, y: float) -> bool:
        """Record a position if drawing.

        Returns:
            bool: True if the position was recorded
        """
        if not self.is_drawing:
            return False
        self.path.append(x, y)
        return True

    def release(self) -> None:
        self.is_drawing = False

    def clear(self) -> None:
        self.is_drawing = False
        self.path = DrawnPath()
