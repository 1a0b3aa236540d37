"""The panel of holes the toys must be fitted into."""

from __future__ import annotations

from shapematch.items import Frame


class Panel:
    """An ordered collection of frames addressed by 1-based number."""

    def __init__(self) -> None:
        self._frames: list[Frame] = []

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    def add_frame(self, frame: Frame) -> None:
        self._frames.append(frame)

    def get_frame(self, index: int) -> Frame:
        """Return the frame with 1-based ``index``; raise IndexError if out of range."""
        if not 1 <= index <= len(self._frames):
            raise IndexError(f"no hole number {index}")
        return self._frames[index - 1]

    def frame_count(self) -> int:
        return len(self._frames)