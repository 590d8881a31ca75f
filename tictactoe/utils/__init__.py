from .visualization import (
    SimpleBoardFormatter,
    describe_history_entry,
    format_move_history,
)

__all__ = [
    'SimpleBoardFormatter',
    'describe_history_entry',
    'format_move_history',
]
