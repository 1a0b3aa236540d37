import random

import pytest

from shapematch.builder import build_scene


@pytest.mark.parametrize("difficulty", [1, 2, 3])
def test_counts(difficulty):
    scene = build_scene(difficulty, random.Random(7))
    toys = scene.player.toy_count()
    assert toys == 3 + difficulty
    assert scene.panel.frame_count() == toys + 2
    assert scene.difficulty == difficulty


@pytest.mark.parametrize("difficulty", [1, 2, 3])
def test_each_toy_has_matching_hole(difficulty):
    scene = build_scene(difficulty, random.Random(11))
    for number, toy in enumerate(scene.player.toys, 1):
        assert toy.matches_frame(scene.panel.get_frame(number))
        assert len(toy.properties) == difficulty


@pytest.mark.parametrize("difficulty", [1, 2, 3])
def test_decoy_frames_have_same_property_count(difficulty):
    scene = build_scene(difficulty, random.Random(3))
    for frame in scene.panel.frames[-2:]:
        assert len(frame.properties) == difficulty


def test_same_seed_same_scene():
    first = build_scene(3, random.Random(123))
    second = build_scene(3, random.Random(123))
    assert [str(f) for f in first.panel.frames] == [str(f) for f in second.panel.frames]
    assert [str(t) for t in first.player.toys] == [str(t) for t in second.player.toys]


def test_new_scene_is_fresh():
    scene = build_scene(2, random.Random(5))
    assert scene.score == 0
    assert not scene.game_over
    assert scene.player.has_current_toy()