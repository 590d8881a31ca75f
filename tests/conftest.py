import pytest

from tictactoe.core.models import BoardSnapshot

from .doubles import board


@pytest.fixture
def empty_board() -> BoardSnapshot:
    return board("---", "---", "---")
