# shapematch

This is a small puzzle game for the console. You get a set of toys and a panel of
holes. Every toy has a hole on the panel that it fits. On the easy level the shape
has to match. On harder levels the colour and the size have to match as well.
Each correct fit earns points. The panel also has two extra holes with random
properties, and these may or may not fit any of your toys.

## Installing

```
pip install .
```

## Playing

```
shapematch
```

The game is played in Russian. You start by choosing a difficulty:

1. Easy: shape only
2. Medium: shape and colour
3. Hard: shape, colour and size

The difficulty sets how many toys you get, which is 3 plus the difficulty. It also
sets how many points each correct fit is worth, which is 10 times the difficulty.

On each turn you can:

1. list your toys,
2. list the holes on the panel,
3. select a toy by its number,
4. put the selected toy into a hole by the hole's number,
5. end the game early.

When a toy fits, it leaves your hand and its points are added to your score. The
selection then goes back to your first remaining toy. Holes stay on the panel
after a toy has been placed in them.

The game ends when you place your last toy or when you quit. If you enter a number
that is not valid, it is rejected and you are asked again. If the input ends
before the game is over, the command stops with exit status 1.

## Using it as a library

You can use the game logic without the console interface:

```python
import random

from shapematch.builder import build_scene

scene = build_scene(2, random.Random(42))
scene.start_game()
print(scene.process_action(0, []).message)   # list the toys
print(scene.process_action(1, []).message)   # list the holes
result = scene.process_action(2, [1])        # select toy 1
result = scene.process_action(3, [1])        # place it into hole 1
print(result.success, result.score_earned, result.game_over)
print(scene.score, scene.game_over)
```

The modules are:

- `shapematch.properties` holds the `ShapeProperty`, `ColorProperty` and `SizeProperty` values and their enums.
- `shapematch.items` holds `Toy` and `Frame`. `Toy.matches_frame` checks whether a toy fits a hole.
- `shapematch.factories` creates random toys and holes. It also has `create_frame_from_toy`, which builds a hole that fits a given toy.
- `shapematch.player.Player` holds the toys, and `shapematch.panel.Panel` holds the holes. Both number their items from 1. `Player.select_toy` and `Panel.get_frame` raise `IndexError` when the number is out of range.
- `shapematch.scene.GameScene` applies the game rules and keeps the score. `process_action` returns an `ActionResult`.
- `shapematch.ui.GameUI` is the console front end. It can be given its own input and output streams and its own random generator.

## What it does not do

The game has no save or load. It keeps no high-score table between runs, and it
only has a text interface.

## Running the tests

```
pip install .[test]
pytest
```