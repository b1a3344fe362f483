from .cursor import CycleCursor
