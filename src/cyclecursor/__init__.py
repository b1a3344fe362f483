from .core.cursor import CycleCursor
from .core.util.errors import StalePositionError
