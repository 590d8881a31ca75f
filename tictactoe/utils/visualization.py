"""Board and move-history rendering helpers for UI shells."""

from typing import Iterable, Sequence, Tuple

from ..core.models import BOARD_SIZE, BoardSnapshot, HistoryEntry


class SimpleBoardFormatter:
    """Simple text-based board formatter."""

    def format_board(self, snapshot: BoardSnapshot) -> str:
        """Format board for display."""
        return self.format_board_with_highlights(snapshot, ())

    def format_board_with_highlights(self, snapshot: BoardSnapshot, highlights: Iterable[Tuple[int, int]]) -> str:
        """Format board with highlighted positions, e.g. a winning line."""
        highlights = {tuple(pos) for pos in highlights}
        result = "  "
        for col in range(BOARD_SIZE):
            result += f" {col + 1} "
        result += "\n"

        for row in range(BOARD_SIZE):
            result += f"{row + 1} "
            for col in range(BOARD_SIZE):
                piece = snapshot.cell(row, col).value
                if (row, col) in highlights:
                    result += f"[{piece}]"
                else:
                    result += f" {piece} "
            result += "\n"

        return result


def describe_history_entry(index: int, entry: HistoryEntry) -> str:
    """Describe one history entry with 1-based cell coordinates."""
    if index == 0 or entry.move is None:
        return "Game start"
    return f"#{index}: Player {entry.player.value} at ({entry.move.row + 1},{entry.move.col + 1})"


def format_move_history(history: Sequence[HistoryEntry], current_index: int) -> str:
    """Convert move history to a list, marking the current step."""
    result = []
    for i, entry in enumerate(history):
        marker = ">" if i == current_index else " "
        result.append(f"{marker} {describe_history_entry(i, entry)}")
    return "\n".join(result)
