"""Creation of random toys and frames."""

from __future__ import annotations

import random

from shapematch.items import Frame, Toy
from shapematch.properties import (
    ColorProperty,
    ColorType,
    Property,
    ShapeProperty,
    ShapeType,
    SizeProperty,
    SizeType,
)


def random_properties(
    property_count: int, rng: random.Random | None = None
) -> list[Property]:
    """Return up to three random properties: shape, then colour, then size."""
    rng = rng if rng is not None else random.Random()
    props: list[Property] = []
    if property_count >= 1:
        props.append(ShapeProperty(rng.choice(list(ShapeType))))
    if property_count >= 2:
        props.append(ColorProperty(rng.choice(list(ColorType))))
    if property_count >= 3:
        props.append(SizeProperty(rng.choice(list(SizeType))))
    return props


def create_random_toy(property_count: int, rng: random.Random | None = None) -> Toy:
    """Return a toy with ``property_count`` random properties (at most three)."""
    return Toy(random_properties(property_count, rng))


def create_random_frame(
    property_count: int, rng: random.Random | None = None
) -> Frame:
    """Return a frame with ``property_count`` random properties (at most three)."""
    return Frame(random_properties(property_count, rng))


def create_frame_from_toy(toy: Toy) -> Frame:
    """Return a frame that the given toy fits exactly."""
    return Frame(toy.properties)