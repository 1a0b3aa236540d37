from shapematch.items import Frame, Toy
from shapematch.properties import (
    ColorProperty,
    ColorType,
    ShapeProperty,
    ShapeType,
    SizeProperty,
    SizeType,
)


def _props():
    return [
        ShapeProperty(ShapeType.STAR),
        ColorProperty(ColorType.BLUE),
        SizeProperty(SizeType.SMALL),
    ]


def test_toy_string():
    toy = Toy([ShapeProperty(ShapeType.STAR), ColorProperty(ColorType.BLUE)])
    assert str(toy) == "Toy [Shape: Star, Color: Blue]"


def test_frame_string():
    frame = Frame([ShapeProperty(ShapeType.CIRCLE)])
    assert str(frame) == "Hole [Shape: Circle]"


def test_empty_descriptions():
    assert str(Toy()) == "Toy []"
    assert str(Frame([])) == "Hole []"


def test_toy_matches_frame_with_same_properties():
    assert Toy(_props()).matches_frame(Frame(_props()))


def test_toy_rejects_frame_with_different_value():
    frame_props = _props()
    frame_props[1] = ColorProperty(ColorType.RED)
    assert not Toy(_props()).matches_frame(Frame(frame_props))


def test_toy_rejects_frame_with_different_length():
    assert not Toy(_props()).matches_frame(Frame(_props()[:2]))
    assert not Toy(_props()[:1]).matches_frame(Frame(_props()))


def test_matching_is_positional():
    assert not Toy(_props()).matches_frame(Frame(list(reversed(_props()))))


def test_empty_toy_matches_empty_frame():
    assert Toy().matches_frame(Frame())


def test_properties_are_copied_from_input():
    source = _props()
    toy = Toy(source)
    source.clear()
    assert len(toy.properties) == 3
    assert toy.properties[0] == ShapeProperty(ShapeType.STAR)


def test_equal_toys_compare_equal():
    toy = Toy(_props())
    frame = Frame(_props())
    assert str(toy) == "Toy [Shape: Star, Color: Blue, Size: Small]"
    assert str(frame) == "Hole [Shape: Star, Color: Blue, Size: Small]"
    assert toy == Toy(_props())
    assert frame == Frame(_props())
    assert not toy == Toy(_props()[:2])
    assert not frame == Frame(_props()[:2])