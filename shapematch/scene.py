"""A single game: the player's toys, the panel of holes, and the score."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from shapematch.panel import Panel
from shapematch.player import Player

POINTS_PER_LEVEL = 10


class _Action(IntEnum):
    SHOW_TOYS = 0
    SHOW_HOLES = 1
    SELECT_TOY = 2
    PLACE_TOY = 3
    FINISH = 4


_ACTION_TITLES = {
    _Action.SHOW_TOYS: "Посмотреть игрушки",
    _Action.SHOW_HOLES: "Посмотреть отверстия",
    _Action.SELECT_TOY: "Выбрать игрушку",
    _Action.PLACE_TOY: "Поместить игрушку в отверстие",
    _Action.FINISH: "Завершить игру",
}


@dataclass
class ActionResult:
    """Outcome of one player action."""

    success: bool
    message: str
    game_over: bool
    score_earned: int = 0


class GameScene:
    """Runs the rules of one game over a player and a panel."""

    def __init__(self, player: Player, panel: Panel, difficulty: int) -> None:
        self.player = player
        self.panel = panel
        self.difficulty = difficulty
        self._score = 0
        self._game_over = False

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        return self._game_over

    def start_game(self) -> None:
        """Reset the score and mark the game as running."""
        self._game_over = False
        self._score = 0

    def available_actions(self) -> list[str]:
        """Return the titles of the actions, numbered from 0 by position."""
        return [_ACTION_TITLES[action] for action in _Action]

    def _points(self) -> int:
        return POINTS_PER_LEVEL * self.difficulty

    def process_action(self, action: int, params: Sequence[int] = ()) -> ActionResult:
        """Perform the action with 0-based number ``action`` and report what happened."""
        result = ActionResult(success=False, message="", game_over=self._game_over)
        try:
            kind = _Action(action)
        except ValueError:
            result.message = "Неизвестное действие."
            return result
        handler = {
            _Action.SHOW_TOYS: self._show_toys,
            _Action.SHOW_HOLES: self._show_holes,
            _Action.SELECT_TOY: self._select_toy,
            _Action.PLACE_TOY: self._place_toy,
            _Action.FINISH: self._finish,
        }[kind]
        handler(result, params)
        return result

    def _show_toys(self, result: ActionResult, params: Sequence[int]) -> None:
        toys = self.player.toys
        lines = ["Ваши игрушки:\n"]
        if not toys:
            lines.append("Нет игрушек.\n")
        else:
            lines.extend(f"{number}. {toy}\n" for number, toy in enumerate(toys, 1))
        result.message = "".join(lines)
        result.success = True

    def _show_holes(self, result: ActionResult, params: Sequence[int]) -> None:
        lines = ["Отверстия на панели:\n"]
        lines.extend(
            f"{number}. {frame}\n" for number, frame in enumerate(self.panel.frames, 1)
        )
        result.message = "".join(lines)
        result.success = True

    def _select_toy(self, result: ActionResult, params: Sequence[int]) -> None:
        if not params:
            result.message = "Не указан номер игрушки."
            return
        index = params[0]
        try:
            self.player.select_toy(index)
        except IndexError:
            result.message = "Неверный номер игрушки."
            return
        result.message = f"Выбрана игрушка №{index}"
        result.success = True

    def _place_toy(self, result: ActionResult, params: Sequence[int]) -> None:
        if not self.player.has_current_toy():
            result.message = "Сначала выберите игрушку (действие 2)."
            return
        if not params:
            result.message = "Не указан номер отверстия."
            return
        try:
            frame = self.panel.get_frame(params[0])
        except IndexError:
            result.message = "Неверный номер отверстия."
            return
        toy = self.player.current_toy()
        if toy is None or not toy.matches_frame(frame):
            result.message = "Неудача! Эта игрушка не подходит для данного отверстия."
            return
        points = self._points()
        self._score += points
        self.player.remove_current_toy()
        result.score_earned = points
        result.success = True
        if self.player.toy_count() == 0:
            self._game_over = True
            result.game_over = True
            result.message = (
                f"Игрушки закончились! Игра завершена.\nВаш счёт: {self._score}"
            )
        else:
            result.message = f"Успех! Игрушка подошла. +{points} очков."

    def _finish(self, result: ActionResult, params: Sequence[int]) -> None:
        self._game_over = True
        result.game_over = True
        result.success = True
        result.message = f"Игра завершена досрочно. Финальный счёт: {self._score}"