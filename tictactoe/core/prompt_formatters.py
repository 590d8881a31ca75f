"""Prompt formatters for BoardSnapshot representation in LLM prompts."""

import json
from abc import ABC, abstractmethod

from .models import BOARD_SIZE, BoardSnapshot, Mark


class PromptFormatter(ABC):
    """Abstract base class for board prompt formatters."""

    # How empty cells appear in the formatted board, for the prompt legend
    empty_legend = "'.'=empty"

    @abstractmethod
    def format_board(self, snapshot: BoardSnapshot) -> str:
        """Format the board for LLM consumption."""
        pass


class DashFormatter(PromptFormatter):
    """One line per row, '-' for empty cells."""

    def __init__(self, placeholder: str = "-"):
        self.placeholder = placeholder
        self.empty_legend = f"'{placeholder}'=empty"

    def format_board(self, snapshot: BoardSnapshot) -> str:
        return "\n".join(
            "".join(self.placeholder if cell is Mark.EMPTY else cell.value for cell in row)
            for row in snapshot.cells
        )


class StandardGridFormatter(PromptFormatter):
    """Grid with 0-based row and column headers."""

    def format_board(self, snapshot: BoardSnapshot) -> str:
        result = "  "
        for col in range(BOARD_SIZE):
            result += f" {col} "
        result += "\n"

        for row in range(BOARD_SIZE):
            result += f"{row} "
            for col in range(BOARD_SIZE):
                result += f" {snapshot.cell(row, col).value} "
            result += "\n"

        return result


class NaturalLanguageFormatter(PromptFormatter):
    """Natural language description format."""

    empty_legend = "unlisted cells are empty"

    def format_board(self, snapshot: BoardSnapshot) -> str:
        pieces = {Mark.X: [], Mark.O: []}

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                mark = snapshot.cell(row, col)
                if mark in pieces:
                    pieces[mark].append(f"({row},{col})")

        description = []
        for mark, positions in pieces.items():
            if positions:
                description.append(f"{mark.value} at: {', '.join(positions)}")

        if not description:
            description.append("Empty board")

        return "\n".join(description)


class JSONFormatter(PromptFormatter):
    """JSON format for structured LLM processing."""

    empty_legend = "null=empty"

    def format_board(self, snapshot: BoardSnapshot) -> str:
        board_data = {
            "board": [[None if cell is Mark.EMPTY else cell.value for cell in row] for row in snapshot.cells],
            "move_count": snapshot.count_marks(),
        }
        return json.dumps(board_data)


def create_prompt_formatter(format_type: str = "dash", **kwargs) -> PromptFormatter:
    """Create a prompt formatter of the specified type."""
    formatters = {
        "dash": DashFormatter,
        "standard": StandardGridFormatter,
        "natural": NaturalLanguageFormatter,
        "json": JSONFormatter,
    }

    if format_type not in formatters:
        raise ValueError(f"Unknown format type: {format_type}. Available: {list(formatters.keys())}")

    return formatters[format_type](**kwargs)
