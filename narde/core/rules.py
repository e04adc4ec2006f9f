# =========================================================
# --- core_rules.py ---
# =========================================================

from typing import List, Optional, Union

from .board import (
    BAR, OFF, BOARD_START, BOARD_END, ENTRY_OFFSET, HOME_PROGRESS, NUM_OF_CHECKERS,
    Board, Color, is_point, location_name,
)
from .dice import DIE_MAX, DIE_MIN, TurnDice, expand_dice
from .errors import (
    BarPriorityViolationError, BearOffNotEligibleError, DestinationMismatchError,
    DieValueUnavailableError, NoCheckerAtSourceError, OutOfBoundsError, PointBlockedError,
)
from .moves import Move

# =========================================================
# Progress coordinates
# =========================================================

#: Half of the board; Black's progress is White's shifted by this many points
HALF_BOARD = 12


def progress_of(loc: int, color: int) -> int:
    """
    Convert a location into color-relative progress (0 = bar .. 25 = off).

    White: point p -> p. Black: point p -> p-12 if p >= 13 else p+12.
    """
    if loc == BAR or loc == OFF:
        return loc
    if color == Color.WHITE:
        return loc
    return loc - HALF_BOARD if loc > HALF_BOARD else loc + HALF_BOARD


def location_from_progress(progress: int, color: int) -> int:
    """Inverse of progress_of. Progress >= 25 is OFF, progress <= 0 is BAR."""
    if progress >= OFF:
        return OFF
    if progress <= BAR:
        return BAR
    if color == Color.WHITE:
        return progress
    return progress + HALF_BOARD if progress <= HALF_BOARD else progress - HALF_BOARD


# =========================================================

class Rule:
    """Base class for Long Narde rules."""

    def __init__(self, rule_id: str, description: str) -> None:
        """
        Initialize a rule.

        Args:
            rule_id: Unique identifier for the rule.
            description: Human-readable description.
        """
        self.id: str = rule_id
        self.description: str = description

    def check(self, **kwargs) -> Union[bool, int, List[int], None]:
        """
        Evaluate the rule.

        Raises:
            NotImplementedError: Must be implemented in subclasses.
        """
        raise NotImplementedError


# --- Specific Rules ---

class BarPriorityRule(Rule):
    """R1: A checker on the bar must re-enter before any other checker moves."""

    def __init__(self) -> None:
        super().__init__("R1", "Player must re-enter checkers from the bar before moving any other checker.")

    def check(self, board: Board, color: int, **kwargs) -> List[int]:
        """
        Return the locations the color may move from.

        Returns:
            [BAR] if the color has a checker on the bar, otherwise every occupied location.
        """
        if board.count_at(color, BAR) > 0:
            return [BAR]
        return board.occupied(color)


class BearingOffEligibilityRule(Rule):
    """R2: Bearing off requires every remaining checker in the home quadrant."""

    def __init__(self) -> None:
        super().__init__("R2", "Player may bear off only if all checkers have progress 19 or more.")

    def check(self, board: Board, color: int, **kwargs) -> bool:
        """True iff no checker of the color is on the bar or below progress 19."""
        for loc in board.occupied(color):
            if progress_of(loc, color) < HOME_PROGRESS:
                return False
        return True


class BlockedPointRule(Rule):
    """R3: A point held by two or more opposing checkers cannot be entered."""

    def __init__(self) -> None:
        super().__init__("R3", "Target point with two or more opponent checkers is blocked.")

    def check(self, board: Board, color: int, point: int, **kwargs) -> bool:
        """True if the point is blocked for the color."""
        return is_point(point) and board.count_at(Color(color).opponent, point) >= 2


class SingleHitRule(Rule):
    """R4: Target with exactly one opposing checker is hit."""

    def __init__(self) -> None:
        super().__init__("R4", "Target point with exactly one opponent checker may be hit.")

    def check(self, board: Board, color: int, point: int, **kwargs) -> bool:
        """True if moving onto the point hits an opposing blot."""
        return is_point(point) and board.count_at(Color(color).opponent, point) == 1


class DestinationRule(Rule):
    """R5: Destination of a checker for a die value."""

    def __init__(self) -> None:
        super().__init__("R5", "Compute destination from source, die and color; overshoot bears off.")

    def check(self, color: int, start: int, die: int, **kwargs) -> int:
        """
        Compute the destination location.

        From the bar the checker enters on point die (White) or 12+die (Black).
        Reaching or passing progress 25 always yields OFF.
        """
        if start == BAR:
            return ENTRY_OFFSET[color] + die
        return location_from_progress(progress_of(start, color) + die, color)


class DiceHelperRule(Rule):
    """R6: Process dice (expand doubles)."""

    def __init__(self) -> None:
        super().__init__("R6", "Process dice, expand doubles to four moves.")

    def check(self, dice: List[int], **kwargs) -> List[int]:
        """Expand a double to four move units."""
        if len(dice) == 2:
            return expand_dice(dice[0], dice[1])
        return list(dice)


class GameOverRule(Rule):
    """R7: A color wins when all of its checkers are borne off."""

    def __init__(self) -> None:
        super().__init__("R7", "Check if a color has borne off all checkers.")

    def check(self, board: Board, color: Optional[int] = None, **kwargs) -> Optional[int]:
        """
        Return the winning color, or None.

        Args:
            board: Board to inspect.
            color: If given, only this color is checked.
        """
        colors = [Color(color)] if color is not None else list(Color)
        for c in colors:
            if board.count_at(c, OFF) == NUM_OF_CHECKERS:
                return c
        return None


# =========================================================

class NardeRules:
    """Aggregates all rules and provides the move legality interface."""

    def __init__(self) -> None:
        """Initialize all rule instances."""
        self.R1 = BarPriorityRule()
        self.R2 = BearingOffEligibilityRule()
        self.R3 = BlockedPointRule()
        self.R4 = SingleHitRule()
        self.R5 = DestinationRule()
        self.R6 = DiceHelperRule()
        self.R7 = GameOverRule()

        self.rules = [self.R1, self.R2, self.R3, self.R4, self.R5, self.R6, self.R7]

    # ---------- Coordinates ----------
    @staticmethod
    def progress_of(loc: int, color: int) -> int:
        """Return color-relative progress of a location."""
        return progress_of(loc, color)

    @staticmethod
    def location_from_progress(progress: int, color: int) -> int:
        """Return the location at a color-relative progress."""
        return location_from_progress(progress, color)

    def destination_of(self, start: int, die: int, color: int) -> int:
        """Return the destination reached from start with a die."""
        return self.R5.check(color=color, start=start, die=die)

    def die_value_needed(self, start: int, target: int, color: int) -> Optional[int]:
        """
        Return the die value that moves a checker from start to target, or None.

        The result is the exact distance; it is only valid between 1 and 6.
        """
        if start == BAR:
            if not is_point(target):
                return None
            needed = target - ENTRY_OFFSET[color]
        else:
            needed = progress_of(target, color) - progress_of(start, color)
        if DIE_MIN <= needed <= DIE_MAX:
            return needed
        return None

    # ---------- Rule shortcuts ----------
    def allowed_start_points(self, board: Board, color: int) -> List[int]:
        """Return source locations allowed by bar priority."""
        return self.R1.check(board=board, color=color)

    def can_bear_off(self, board: Board, color: int) -> bool:
        """Return True if the color may bear off."""
        return self.R2.check(board=board, color=color)

    def is_blocked(self, board: Board, color: int, point: int) -> bool:
        """Return True if the point is blocked for the color."""
        return self.R3.check(board=board, color=color, point=point)

    def is_hit(self, board: Board, color: int, point: int) -> bool:
        """Return True if the color would hit a blot on the point."""
        return self.R4.check(board=board, color=color, point=point)

    def process_dice(self, dice: List[int]) -> List[int]:
        """Process dice roll and expand doubles."""
        return self.R6.check(dice=dice)

    def check_win(self, board: Board, color: int) -> bool:
        """Return True if all checkers of the color are borne off."""
        return self.R7.check(board=board, color=color) is not None

    def winner(self, board: Board) -> Optional[int]:
        """Return the color that has borne off everything, if any."""
        return self.R7.check(board=board)

    # ---------- Move generation ----------
    def _reachable(self, board: Board, color: int, target: int, bear_off_allowed: bool) -> bool:
        """Check the target of a move: OFF needs eligibility, points must not be blocked."""
        if target == OFF:
            return bear_off_allowed
        return is_point(target) and not self.is_blocked(board, color, target)

    def legal_destinations_from(self, board: Board, dice: TurnDice, color: int, start: int) -> List[int]:
        """
        Return every destination reachable from start with the remaining dice.

        Raises:
            NoCheckerAtSourceError: If the color has no checker at start.
            BarPriorityViolationError: If the color must enter from the bar first.
        """
        self._check_source(board, color, start)
        bear_off_allowed = self.can_bear_off(board, color)
        targets = set()
        for die in dice.available_values():
            target = self.destination_of(start, die, color)
            if self._reachable(board, color, target, bear_off_allowed):
                targets.add(target)
        return sorted(targets)

    def all_legal_moves(self, board: Board, dice: TurnDice, color: int) -> List[Move]:
        """
        Return every legal single-die move of the color.

        Moves are ordered by source location, then die value.
        """
        moves: List[Move] = []
        values = dice.available_values()
        if not values:
            return moves
        bear_off_allowed = self.can_bear_off(board, color)
        for start in self.allowed_start_points(board, color):
            for die in values:
                target = self.destination_of(start, die, color)
                if self._reachable(board, color, target, bear_off_allowed):
                    moves.append(Move(start, target, die))
        return moves

    def has_any_move(self, board: Board, dice: TurnDice, color: int) -> bool:
        """Return True if at least one legal move exists."""
        return bool(self.all_legal_moves(board, dice, color))

    # ---------- Validation / Application ----------
    def _check_source(self, board: Board, color: int, start: int) -> None:
        if board.count_at(color, BAR) > 0 and start != BAR:
            raise BarPriorityViolationError(
                f"{Color(color)} has a checker on the bar and must enter it before moving from {location_name(start)}"
            )
        if not BAR <= start <= BOARD_END or board.count_at(color, start) == 0:
            raise NoCheckerAtSourceError(f"{Color(color)} has no checker at {location_name(start)}")

    def validate_move(self, board: Board, dice: TurnDice, color: int, move: Move) -> None:
        """
        Check every precondition of a move without mutating anything.

        Raises:
            IllegalMoveError: The first failing precondition, as its specific subclass.
        """
        if move.to_point != OFF and not BOARD_START <= move.to_point <= BOARD_END:
            raise OutOfBoundsError(f"Point {move.to_point} out of bounds", move)

        if not dice.can_use(move.die):
            raise DieValueUnavailableError(f"Die value {move.die} not available", move)

        try:
            self._check_source(board, color, move.from_point)
        except (BarPriorityViolationError, NoCheckerAtSourceError) as e:
            e.move = move
            raise

        expected = self.destination_of(move.from_point, move.die, color)
        if expected != move.to_point:
            raise DestinationMismatchError(
                f"Die {move.die} from {location_name(move.from_point)} goes to "
                f"{location_name(expected)}, not {location_name(move.to_point)}",
                move,
            )

        if move.to_point == OFF:
            if not self.can_bear_off(board, color):
                raise BearOffNotEligibleError("Not all checkers in home quadrant, can't bear off", move)
        elif self.is_blocked(board, color, move.to_point):
            raise PointBlockedError(
                f"Point {move.to_point} blocked by "
                f"{board.count_at(Color(color).opponent, move.to_point)} opponent checkers",
                move,
            )

    def apply_move_to_board(self, board: Board, color: int, move: Move) -> bool:
        """
        Mutate a board with an already validated move, resolving a hit first.

        Used both for the live session and for AI simulation on cloned boards.

        Returns:
            True if an opposing blot was sent to the bar.
        """
        hit = self.is_hit(board, color, move.to_point)
        if hit:
            opp = Color(color).opponent
            board.move_checker(opp, move.to_point, BAR)
        board.move_checker(color, move.from_point, move.to_point)
        return hit
