# =========================================================
# --- core_engine.py ---
# =========================================================

import logging
import random
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from ..players.player import Player

from .board import BAR, OFF, Board, Color, location_name
from .dice import TurnDice
from .errors import IllegalMoveError, TurnStateError
from .moves import Move, MoveResult
from .rules import NardeRules
from .state import GameSession

logger = logging.getLogger(__name__)

# ========================================================

#: A double grants four move units, so no turn has more moves than this
MAX_MOVES_PER_TURN = 4


class EngineEvents:
    """
    Event factory for game engine events.
    Returns structured dictionaries for UI, animation or logging layers.
    """

    def turn_start(self, turn: Color, board: Board, bear_off_allowed: bool) -> Dict[str, Any]:
        """Event: A new turn has started."""
        return {
            "type": "turn_start",
            "turn": turn,
            "board": board,
            "bear_off_allowed": bear_off_allowed,
        }

    def roll_dice(self, dice: Tuple[int, int], is_double: bool, turn: Color, player_type: str) -> Dict[str, Any]:
        """Event: Dice have been rolled."""
        return {
            "type": "roll_dice",
            "dice": dice,
            "is_double": is_double,
            "turn": turn,
            "player_type": player_type,
        }

    def no_moves(self, turn: Color) -> Dict[str, Any]:
        """Event: Player has no legal moves available."""
        return {
            "type": "no_moves",
            "turn": turn,
        }

    def chosen_move(self, turn: Color, move: Move) -> Dict[str, Any]:
        """Event: Player has chosen a move."""
        return {
            "type": "chosen_move",
            "turn": turn,
            "move": move,
        }

    def apply_move(self, result: MoveResult) -> Dict[str, Any]:
        """Event: A move has been applied; drives repositioning and hit animation."""
        return {
            "type": "apply_move",
            "move": result.move,
            "hit": result.hit,
            "board": result.board,
        }

    def turn_end(self, next_turn: Color, board: Board) -> Dict[str, Any]:
        """Event: The current turn has ended."""
        return {
            "type": "turn_end",
            "next_turn": next_turn,
            "board": board,
        }

    def game_over(self, board: Board, winner: Color, player_type: str, move_count: int) -> Dict[str, Any]:
        """Event: The game has ended."""
        return {
            "type": "game_over",
            "board": board,
            "winner": winner,
            "player_type": player_type,
            "move_count": move_count,
        }


class GameEngine:
    """
    Long Narde game engine: turn state machine, move application and event stream.

    A turn runs AwaitingRoll -> roll_dice -> apply_move* -> end_turn. The engine
    is synchronous and single-writer; callers serialize their requests.

    Attributes:
        session (GameSession): Live game state.
        rules (NardeRules): Rules engine.
        players (List[Optional[Player]]): Player per color, needed only for play_turn/play_game.
        rng (random.Random): Random number generator for dice rolls.
        emit_enabled (bool): If True, yield events during play.
        events (EngineEvents): Event generator.
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        rules: Optional[NardeRules] = None,
        players: Optional[Sequence[Optional[Player]]] = None,
        rng: Optional[random.Random] = None,
        emit_enabled: bool = True,
    ):
        self.session: GameSession = session or GameSession()
        self.rules: NardeRules = rules or NardeRules()
        self.players: List[Optional[Player]] = list(players) if players else [None, None]
        self.rng: random.Random = rng or random.Random()
        self.emit_enabled: bool = emit_enabled
        self.events: EngineEvents = EngineEvents()

    # ---------- Properties ----------
    @property
    def turn(self) -> Color:
        """Color to move."""
        return self.session.turn

    @property
    def board(self) -> Board:
        """Live board. Read only for callers; use apply_move to change it."""
        return self.session.board

    @property
    def dice(self) -> TurnDice:
        """Dice of the current turn."""
        return self.session.dice

    @property
    def game_over(self) -> bool:
        """True once a color has won."""
        return self.session.game_over

    @property
    def winner(self) -> Optional[Color]:
        """Winning color, if any."""
        return self.session.winner

    @property
    def player(self) -> Optional[Player]:
        """Return the player object of the color to move."""
        return self.players[self.turn]

    @property
    def legal_moves(self) -> List[Move]:
        """Return all legal single moves for the current dice and board."""
        return self.rules.all_legal_moves(self.board, self.dice, self.turn)

    def get_player_type(self, color: Color) -> str:
        """Return string representation of a player."""
        return str(self.players[color])

    def _require_active(self) -> None:
        if self.session.game_over:
            raise TurnStateError(f"Game is over, {self.session.winner} won")

    # ---------- Dice ----------
    def roll_dice(self, die1: Optional[int] = None, die2: Optional[int] = None) -> Tuple[int, int]:
        """
        Roll the dice for the current turn. Exactly one roll is allowed per turn.

        Args:
            die1, die2: Optional fixed values (scripted rolls). Both or neither.

        Raises:
            TurnStateError: If the dice were already rolled or the game is over.
            ValueError: If only one die value is given, or a value is outside 1-6.
        """
        self._require_active()
        if self.dice.has_rolled:
            raise TurnStateError("Already rolled this turn")
        if (die1 is None) != (die2 is None):
            raise ValueError(f"Scripted roll needs both dice, got {die1}, {die2}")

        if die1 is not None:
            values = self.dice.set(die1, die2)
        else:
            values = self.dice.roll(self.rng)

        logger.debug("%s rolled %s (remaining %s)", self.turn, values, self.dice.remaining)
        if not self.legal_moves:
            logger.info("No valid moves available for %s", self.turn)
        return values

    # ---------- Moves ----------
    def legal_destinations_from(self, start: int) -> List[int]:
        """Return destinations reachable from start for the color to move."""
        return self.rules.legal_destinations_from(self.board, self.dice, self.turn, start)

    def apply_move(self, move: Move) -> MoveResult:
        """
        Validate and apply a single move for the color to move.

        Either the whole move is applied (hit, checker move, die consumption)
        or nothing changes.

        Raises:
            TurnStateError: If the game is over or the dice were not rolled.
            IllegalMoveError: If a precondition of the move fails.
        """
        self._require_active()
        if not self.dice.has_rolled:
            raise TurnStateError("Roll the dice before moving")

        color = self.turn
        try:
            self.rules.validate_move(self.board, self.dice, color, move)
        except IllegalMoveError as e:
            logger.debug("Move %s rejected (%s): %s", move, e.kind.value, e)
            raise

        hit = self.rules.apply_move_to_board(self.board, color, move)
        self.dice.use(move.die)
        self.session.move_count += 1
        self.session._assert("apply_move")

        logger.debug("MOVE: %s %s", color, move)
        if hit:
            logger.info("HIT! %s checker sent to bar from point %s", color.opponent, move.to_point)

        if self.rules.check_win(self.board, color):
            self.session.winner = color
            logger.info("%s wins after %d moves", color, self.session.move_count)

        return MoveResult(
            success=True,
            move=move,
            hit=hit,
            board=self.board.clone(),
            game_over=self.session.game_over,
            winner=self.session.winner,
        )

    def _resolve_die(self, start: int, target: int) -> Optional[int]:
        """
        Pick the die for a (from, to) request.

        Bearing off may overshoot, so the smallest remaining die that reaches OFF is used.
        """
        if target == OFF and start != BAR:
            distance = OFF - self.rules.progress_of(start, self.turn)
            candidates = [d for d in self.dice.available_values() if d >= distance]
            return min(candidates) if candidates else None
        return self.rules.die_value_needed(start, target, self.turn)

    def try_move(self, start: int, target: int, die: Optional[int] = None) -> MoveResult:
        """
        Non-raising move request for input layers.

        Args:
            start: Source location.
            target: Target location.
            die: Die value to use; derived from the distance when omitted.

        Returns:
            MoveResult with success False and the rejection reason when illegal.
        """
        if die is None:
            die = self._resolve_die(start, target)
            if die is None:
                # No die covers this distance; report it as the die being unavailable
                logger.debug("No valid dice value for move %s > %s", location_name(start), location_name(target))
                die = 0
        move = Move(start, target, die)
        try:
            return self.apply_move(move)
        except IllegalMoveError as e:
            return MoveResult.failure(e, move)

    def check_win(self, color: Optional[Color] = None) -> bool:
        """Return True if the color (default: color to move) has borne off everything."""
        return self.rules.check_win(self.board, self.turn if color is None else color)

    # ---------- Turn Management ----------
    def end_turn(self) -> None:
        """
        Reset the dice and pass the turn to the opponent.

        Raises:
            TurnStateError: If the game is over.
        """
        self._require_active()
        self.dice.reset()
        self.session.switch_turn()
        self.session.turn_count += 1
        logger.debug("Turn changed to %s", self.turn)

    def new_game(self, board: Optional[Board] = None, start_player: Color = Color.WHITE) -> None:
        """Discard the current game and start a fresh one."""
        self.session.start_game(board, start_player)
        logger.info("New game started, %s to move", self.turn)

    # ---------- Event Emission ----------
    def emit(self, event: dict) -> Iterator[Dict[str, Any]]:
        """Yield an event if emission is enabled."""
        if self.emit_enabled:
            yield event

    # ---------- Game Loop ----------
    def play_turn(self) -> Iterator[Dict[str, Any]]:
        """
        Play one full turn for the color to move using its player object.

        The player is asked for one move at a time until the dice are used up,
        no legal move remains, or it declines (returns None).

        Yields:
            dict: Engine events describing the turn.
        """
        self._require_active()
        player = self.player
        if player is None:
            raise TurnStateError(f"No player assigned to {self.turn}")

        yield from self.emit(self.events.turn_start(
            self.turn, self.board.clone(), self.rules.can_bear_off(self.board, self.turn)
        ))

        values = self.roll_dice()
        yield from self.emit(self.events.roll_dice(values, self.dice.is_double, self.turn, str(player)))

        moves_made = 0
        if not self.legal_moves:
            yield from self.emit(self.events.no_moves(self.turn))

        while not self.dice.all_used and moves_made < MAX_MOVES_PER_TURN and not self.game_over:
            moves = self.legal_moves
            if not moves:
                break

            move = player.select_move(moves, self.board.clone(), self.dice.copy())
            if move is None:
                break
            yield from self.emit(self.events.chosen_move(self.turn, move))

            result = self.apply_move(move)
            moves_made += 1
            yield from self.emit(self.events.apply_move(result))

        if self.game_over:
            yield from self.emit(self.events.game_over(
                self.board.clone(), self.winner, self.get_player_type(self.winner), self.session.move_count
            ))
            return

        self.end_turn()
        yield from self.emit(self.events.turn_end(self.turn, self.board.clone()))

    def play_game(self, max_turns: Optional[int] = None) -> Iterator[Dict[str, Any]]:
        """
        Play turns until a color wins.

        Args:
            max_turns (Optional[int]): Maximum turns to play. None = no limit.

        Yields:
            dict: Engine events describing the game progression.
        """
        turns_played = 0
        while not self.game_over:
            if max_turns is not None and turns_played >= max_turns:
                break
            yield from self.play_turn()
            turns_played += 1
