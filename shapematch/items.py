"""Toys held by the player and the holes (frames) on the panel."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from shapematch.properties import Property


def _describe(title: str, properties: tuple[Property, ...]) -> str:
    return f"{title} [{', '.join(str(p) for p in properties)}]"


@dataclass(frozen=True)
class Frame:
    """A hole on the panel, described by an ordered set of properties."""

    properties: tuple[Property, ...] = field(default_factory=tuple)

    def __init__(self, properties: Iterable[Property] = ()) -> None:
        object.__setattr__(self, "properties", tuple(properties))

    def __str__(self) -> str:
        return _describe("Hole", self.properties)


@dataclass(frozen=True)
class Toy:
    """A toy, described by an ordered set of properties."""

    properties: tuple[Property, ...] = field(default_factory=tuple)

    def __init__(self, properties: Iterable[Property] = ()) -> None:
        object.__setattr__(self, "properties", tuple(properties))

    def matches_frame(self, frame: Frame) -> bool:
        """Return True if every property matches the frame's property at the same position."""
        if len(self.properties) != len(frame.properties):
            return False
        return all(
            mine.matches(theirs)
            for mine, theirs in zip(self.properties, frame.properties)
        )

    def __str__(self) -> str:
        return _describe("Toy", self.properties)