from typing import Optional

from cyclecursor.core.util.defs import STALE_POSITION_HINT


class StalePositionError(IndexError):
    """
    Raised when a cursor position no longer indexes into its backing list, i.e. the list was shrunk externally after
    the position was last set by the cursor.
    """

    def __init__(self, position: int, length: int, msg: Optional[str] = None) -> None:
        self.position = position
        self.length = length
        if msg is None:
            msg = f'Cursor position {position} is out of range for a backing list of length {length}. {STALE_POSITION_HINT}'
        super().__init__(msg)
