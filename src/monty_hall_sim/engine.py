"""
A single Monty Hall trial: the car is hidden, the player picks, the host opens a
losing door and the player optionally switches.
"""
from .config import DOORS_NUMBER
from .renderer import render_board
from .selector import RandomIndexSelector
from .state import Board, Phase, new_board

from collections.abc import Callable

from loguru import logger

# Silent as a library; configure_logging turns tracing on.
logger.disable("monty_hall_sim")

PhaseObserver = Callable[[Phase, Board], None]


class GameEngine:
    """Plays independent three-door trials against one random source."""

    def __init__(self, selector: RandomIndexSelector, *, log=None) -> None:
        """Initialises the engine.

        Args:
            selector (RandomIndexSelector): source of every random draw of a trial.
            log (optional): loguru logger receiving the trace lines. Defaults to the
              module logger bound with ``component="GameEngine"``.
        """
        self.selector = selector
        self.log = log if log is not None else logger.bind(component="GameEngine")

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                    Public API                                    #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def play(self, switch_strategy: bool, observer: PhaseObserver | None = None) -> bool:
        """Runs one complete trial on a fresh board.

        Args:
            switch_strategy (bool): whether the player switches after the host's reveal.
            observer (PhaseObserver | None, optional): called with the phase and the live
              board after each completed phase. Defaults to None.

        Raises:
            NoSuitableCandidateError: if the board ends up in a state where the host or
              the player has no door left to choose from.

        Returns:
            bool: whether the door selected at the end of the trial hides the car.
        """
        notify = observer or (lambda phase, board: None)
        board = new_board(DOORS_NUMBER)

        car_index = self.selector.uniform_int(len(board) - 1)
        board[car_index].has_car = True
        self.log.debug("Car is at door {door}", door=car_index + 1)
        notify(Phase.CAR_PLACEMENT, board)

        # Drawn independently of the car, so the first pick may already be the winner.
        player_choice_index = self.selector.uniform_int(len(board) - 1)
        board[player_choice_index].is_selected = True
        self.log.debug("Player chooses door {door}", door=player_choice_index + 1)
        self._trace_board("Initial board:", board)
        notify(Phase.PLAYER_INITIAL_PICK, board)

        opened_index = self.selector.choose_index_matching(
            board, lambda door: not door.is_selected and not door.has_car
        )
        board[opened_index].is_open = True
        self.log.debug("Door {door} opened", door=opened_index + 1)
        self._trace_board("Current board:", board)
        notify(Phase.HOST_REVEAL, board)

        if switch_strategy:
            new_choice_index = self.selector.choose_index_matching(
                board, lambda door: not door.is_selected and not door.is_open
            )
            self.log.debug("Player changes choice to door {door}", door=new_choice_index + 1)
            board[player_choice_index].is_selected = False
            board[new_choice_index].is_selected = True
            player_choice_index = new_choice_index
            self._trace_board("Board after player changes choice:", board)
            notify(Phase.OPTIONAL_SWITCH, board)

        notify(Phase.RESOLVE, board)
        return board[player_choice_index].has_car

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                 Private helpers                                  #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def _trace_board(self, title: str, board: Board) -> None:
        self.log.debug(title)
        # Rendered only when a DEBUG handler is installed.
        self.log.opt(lazy=True).debug("{board}", board=lambda: render_board(board))
