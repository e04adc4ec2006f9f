# =========================================================
# --- cli_boardDisplay.py ---
# =========================================================

from typing import Iterable, List, Optional

from ..core.board import BAR, OFF, BOARD_START, BOARD_END, Board, Color

from .terminal import Palette, clear_screen, paint

# =========================================================

class BoardDisplay:
    """
    Class for displaying the Long Narde board in the terminal.

    Upper row: points 13-24 left to right (White's home 19-24 on the right).
    Lower row: points 12-1 left to right (Black's home 7-12 on the left).

    Attributes:
        board (Board): The board to draw.
        clear_screen (bool): Whether to clear the screen before drawing.
        field_size (int): Width of a board point for formatting.
        use_color (bool): Whether to use colored output.
    """

    def __init__(self, board: Board, clear_screen: bool = True, use_color: bool = True) -> None:
        self.board: Board = board
        self.clear_screen: bool = clear_screen
        self.field_size: int = 3  # Width of each board point for alignment
        self.use_color: bool = use_color

    def _paint(self, text: str, color: str) -> str:
        return paint(text, color, self.use_color)

    def _point_str(self, point: int) -> str:
        """
        Returns a formatted string for a board point: W<n>, B<n> or '...'.
        """
        white = self.board.count_at(Color.WHITE, point)
        black = self.board.count_at(Color.BLACK, point)

        if white:
            return self._paint(f"W{white}".rjust(self.field_size), Palette.CHECKER[Color.WHITE])
        if black:
            return self._paint(f"B{black}".rjust(self.field_size), Palette.CHECKER[Color.BLACK])
        return "..."  # Empty point

    def _color_index(
        self,
        point: int,
        from_points: Iterable[int],
        to_points: Iterable[int],
    ) -> str:
        """
        Returns a point number colored by its role in the highlighted moves.

        - GREEN: point is a source
        - YELLOW: point is a target
        - PURPLE: point is both
        """
        s = f"{point}".rjust(self.field_size)
        if point in from_points and point in to_points:
            return self._paint(s, Palette.SOURCE_AND_TARGET)
        if point in from_points:
            return self._paint(s, Palette.SOURCE)
        if point in to_points:
            return self._paint(s, Palette.TARGET)
        return s

    def render(self, from_points: Optional[Iterable[int]] = None, to_points: Optional[Iterable[int]] = None) -> List[str]:
        """
        Build the board as a list of text lines.

        Args:
            from_points: Points checkers may move from (highlighted).
            to_points: Points checkers may move to (highlighted).
        """
        from_points = set(from_points or ())
        to_points = set(to_points or ())

        half = (BOARD_END - BOARD_START + 1) // 2
        sep = " "
        upper_range = range(half + 1, BOARD_END + 1)
        lower_range = range(half, BOARD_START - 1, -1)

        lines = [self._paint("--- Board ---", Palette.BOLD)]
        lines.append(sep.join(self._color_index(p, from_points, to_points) for p in upper_range))
        lines.append(sep.join(self._point_str(p) for p in upper_range))
        lines.append(sep.join(self._point_str(p) for p in lower_range))
        lines.append(sep.join(self._color_index(p, from_points, to_points) for p in lower_range))
        lines.append(self.bar_line())
        lines.append(self.off_line())
        return lines

    def bar_line(self) -> str:
        """Checkers waiting on the bar for both colors."""
        white = self._paint(f"W:{self.board.count_at(Color.WHITE, BAR)}", Palette.CHECKER[Color.WHITE])
        black = self._paint(f"B:{self.board.count_at(Color.BLACK, BAR)}", Palette.CHECKER[Color.BLACK])
        return f"Bar  {white} | {black}"

    def off_line(self) -> str:
        """Borne off checkers for both colors."""
        white = self._paint(f"W:{self.board.count_at(Color.WHITE, OFF)}", Palette.CHECKER[Color.WHITE])
        black = self._paint(f"B:{self.board.count_at(Color.BLACK, OFF)}", Palette.CHECKER[Color.BLACK])
        return f"Off  {white} | {black}"

    def draw_all(self, from_points: Optional[Iterable[int]] = None, to_points: Optional[Iterable[int]] = None) -> None:
        """
        Draws the entire board, including points, bar and borne off checkers.
        """
        if self.clear_screen:
            clear_screen()
        print("\n".join(self.render(from_points, to_points)))
