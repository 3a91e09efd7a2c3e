from .tiles import (TileState, Tile, constraints_from_rows, constraints_from_history,
                    row_from_pattern)
from .text import parse_feedback_line, read_feedback_file
from .debounce import Debouncer, DEBOUNCE_SECONDS
from .watch import FileWatcher, watch, POLL_SECONDS

__all__ = [
    "TileState", "Tile", "constraints_from_rows", "constraints_from_history",
    "row_from_pattern", "parse_feedback_line", "read_feedback_file",
    "Debouncer", "DEBOUNCE_SECONDS", "FileWatcher", "watch", "POLL_SECONDS",
]
