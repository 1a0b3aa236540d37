"""Text console front end for the game."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from shapematch.builder import build_scene
from shapematch.scene import GameScene

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_SELECT_TOY = 2
_PLACE_TOY = 3


class GameUI:
    """Plays one game, reading choices from a text stream."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._in = stdin
        self._out = stdout
        self._rng = rng

    @property
    def _input(self) -> TextIO:
        return self._in if self._in is not None else sys.stdin

    def _write(self, text: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(text)
        out.flush()

    def run(self) -> None:
        """Play one game from difficulty choice to final score."""
        self._write("=== Игра 'Сопоставь предмет' ===\n")
        difficulty = self._choose_difficulty()
        scene = build_scene(difficulty, self._rng)
        scene.start_game()

        while not scene.game_over:
            self._display_game_info(scene)
            choice = self._action_choice(scene.available_actions())
            params: list[int] = []
            if choice == _SELECT_TOY:
                self._write("Введите номер игрушки: ")
                params.append(self.read_int(1, scene.player.toy_count()))
            elif choice == _PLACE_TOY:
                self._write("Введите номер отверстия: ")
                params.append(self.read_int(1, scene.panel.frame_count()))
            result = scene.process_action(choice, params)
            self._write(result.message + "\n")
            if result.score_earned > 0:
                self._write(f"Текущий счёт: {scene.score}\n")
            if result.game_over:
                break
        self._write(f"Игра окончена. Финальный счёт: {scene.score}\n")

    def _choose_difficulty(self) -> int:
        self._write(
            "Выберите сложность:\n"
            "1 - Лёгкая (только форма)\n"
            "2 - Средняя (форма+цвет)\n"
            "3 - Сложная (форма+цвет+размер)\n"
        )
        return self.read_int(1, 3)

    def _display_game_info(self, scene: GameScene) -> None:
        self._write("\n--- Ход игры ---\n")
        self._write(f"Счёт: {scene.score}\n")
        self._write(f"Игрушек осталось: {scene.player.toy_count()}\n")
        toy = scene.player.current_toy()
        if toy is not None:
            self._write(f"Выбрана игрушка: {toy}\n")
        else:
            self._write("Игрушка не выбрана.\n")

    def _action_choice(self, actions: Sequence[str]) -> int:
        self._write("\nДоступные действия:\n")
        for number, title in enumerate(actions, 1):
            self._write(f"{number}. {title}\n")
        return self.read_int(1, len(actions)) - 1

    def read_int(self, low: int, high: int) -> int:
        """Read an integer in ``[low, high]``, asking again until one is given.

        Raises EOFError when the input runs out.
        """
        for line in self._input:
            if not line.strip():
                continue
            match = _LEADING_INT.match(line)
            if match is not None and low <= int(match.group(1)) <= high:
                return int(match.group(1))
            self._write(f"Ошибка! Введите число от {low} до {high}: ")
        raise EOFError("input ended before a number was given")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the console."""
    try:
        GameUI().run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())