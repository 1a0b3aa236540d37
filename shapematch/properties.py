"""Properties a toy or a hole can have: shape, colour and size."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class _LabelledEnum(Enum):
    """Enum whose members print as a capitalised word."""

    @property
    def label(self) -> str:
        return self.name.capitalize()


class ShapeType(_LabelledEnum):
    CIRCLE = 0
    SQUARE = 1
    TRIANGLE = 2
    STAR = 3
    RECTANGLE = 4


class ColorType(_LabelledEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3


class SizeType(_LabelledEnum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2


class Property(ABC):
    """A single feature that must agree between a toy and a hole."""

    @abstractmethod
    def matches(self, other: Property) -> bool:
        """Return True if ``other`` is the same kind of property with the same value."""

    @abstractmethod
    def __str__(self) -> str:
        ...


@dataclass(frozen=True)
class ShapeProperty(Property):
    shape: ShapeType

    def matches(self, other: Property) -> bool:
        return isinstance(other, ShapeProperty) and other.shape is self.shape

    def __str__(self) -> str:
        return f"Shape: {self.shape.label}"


@dataclass(frozen=True)
class ColorProperty(Property):
    color: ColorType

    def matches(self, other: Property) -> bool:
        return isinstance(other, ColorProperty) and other.color is self.color

    def __str__(self) -> str:
        return f"Color: {self.color.label}"


@dataclass(frozen=True)
class SizeProperty(Property):
    size: SizeType

    def matches(self, other: Property) -> bool:
        return isinstance(other, SizeProperty) and other.size is self.size

    def __str__(self) -> str:
        return f"Size: {self.size.label}"