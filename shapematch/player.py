"""The player's collection of toys and the currently selected one."""

from __future__ import annotations

from shapematch.items import Toy


class Player:
    """Holds toys and tracks which one is selected (1-based selection)."""

    def __init__(self) -> None:
        self._toys: list[Toy] = []
        self._current = 0

    @property
    def toys(self) -> tuple[Toy, ...]:
        return tuple(self._toys)

    def add_toy(self, toy: Toy) -> None:
        self._toys.append(toy)

    def select_toy(self, index: int) -> None:
        """Select the toy with 1-based ``index``; raise IndexError if out of range."""
        if not 1 <= index <= len(self._toys):
            raise IndexError(f"no toy number {index}")
        self._current = index - 1

    def current_toy(self) -> Toy | None:
        """Return the selected toy, or None if there is none."""
        if self._current >= len(self._toys):
            return None
        return self._toys[self._current]

    def has_current_toy(self) -> bool:
        return self._current < len(self._toys)

    def toy_count(self) -> int:
        return len(self._toys)

    def remove_current_toy(self) -> Toy:
        """Remove and return the selected toy; selection goes back to the first toy."""
        if self._current >= len(self._toys):
            raise IndexError("no toy is selected")
        toy = self._toys.pop(self._current)
        self._current = 0
        return toy

    def clear_current_toy(self) -> None:
        self._current = 0