from logging import getLogger, Logger
from operator import index
from typing import Final, Generic, Iterable, Iterator, Optional, SupportsIndex, TypeVar, Any, Union, overload

from typing_extensions import Self

from cyclecursor.core.util.errors import StalePositionError

logger: Final[Logger] = getLogger(__name__)

_T = TypeVar('_T')

class CycleCursor(Generic[_T]):
    """
    A cycling, seekable and peekable cursor over the elements of an iterable.

    A new cursor points to no element (``pos is None``). A first call to :meth:`cycle_next` or :meth:`cycle_prev` is
    required to start pointing to an element, so the result of :meth:`get` has to be tested for ``None`` before usage.

    The elements are held by the public list ``inner`` which may be used for any list operation (append, remove, sort,
    ...). Any such modification keeps the cursor position unchanged. If the list was shrunk below the position,
    :meth:`get` raises a :class:`StalePositionError`; call :meth:`cycle_next`, :meth:`cycle_prev` or :meth:`seek` to
    return to a valid position. Prefer :meth:`get` over indexing ``inner`` directly.
    """

    def __init__(self, iterable: Iterable[_T] = ()) -> None:
        """
        :param iterable: A finite iterable whose elements are copied into the cursor in iteration order (optional).
        """
        self.inner: list[_T] = list(iterable)
        self.pos: Optional[int] = None

    @classmethod
    def from_iterable(cls, iterable: Iterable[_T]) -> Self:
        """
        Creates a cursor from the elements of an iterable.
        :param iterable: A finite iterable whose elements are copied into the cursor in iteration order.
        :return: A new cursor which does not point to any element yet.
        """
        return cls(iterable)

    def _offset_pos(self, offset: SupportsIndex) -> int:
        max_items = len(self.inner)
        offset = index(offset)
        norm_offset = max_items + offset if offset < 0 else offset
        base = self.pos if self.pos is not None else max_items - 1
        return (base + max_items + norm_offset) % max_items

    def cycle_next(self) -> None:
        """
        Moves the cursor to the next element. If no element exists, wraps back to the first element.
        """
        max_items = len(self.inner)
        if max_items == 0:
            return

        if self.pos is None:
            logger.debug(f'Entering {max_items} elements at the first element')
            self.pos = 0
        else:
            self.pos = (self.pos + 1) % max_items

    def cycle_prev(self) -> None:
        """
        Moves the cursor to the previous element. If no element exists, wraps to the last element.
        """
        max_items = len(self.inner)
        if max_items == 0:
            return

        if self.pos is None:
            logger.debug(f'Entering {max_items} elements at the last element')
            self.pos = max_items - 1
        else:
            self.pos = (self.pos - 1 + max_items) % max_items

    def peek(self, offset: SupportsIndex) -> Optional[_T]:
        """
        Returns the element at a positive or negative offset from the current position without moving the cursor.
        An unset cursor behaves as if it were placed right before the first element.
        :param offset: The signed distance to the element to look at.
        :return: ``None`` if the cursor holds no elements; otherwise the element at the offset.
        """
        if len(self.inner) == 0:
            return None
        return self.inner[self._offset_pos(offset)]

    def seek(self, offset: SupportsIndex) -> None:
        """
        Moves the cursor by a positive or negative offset from the current position. The target is the same element
        :meth:`peek` would return for the offset.
        :param offset: The signed distance to move the cursor by.
        """
        if len(self.inner) == 0:
            return

        pos = self._offset_pos(offset)
        if self.pos is None:
            logger.debug(f'Entering {len(self.inner)} elements at index {pos}')
        self.pos = pos

    def get(self) -> Optional[_T]:
        """
        Returns the element the cursor currently points to.
        :return: ``None`` if the cursor does not point to any element yet; otherwise the current element.
        :raises StalePositionError: If the backing list was shrunk below the cursor position.
        """
        if self.pos is None:
            return None

        if self.pos >= len(self.inner):
            logger.error(f'Stale cursor position {self.pos} for {len(self.inner)} elements')
            raise StalePositionError(self.pos, len(self.inner))

        return self.inner[self.pos]

    def copy(self) -> Self:
        """
        Creates a shallow copy of the cursor. The copy owns a new backing list and shares the current position.
        :return: The copied cursor.
        """
        other = type(self)(self.inner)
        other.pos = self.pos
        return other

    __copy__ = copy

    def __len__(self) -> int:
        return len(self.inner)

    def __bool__(self) -> bool:
        return len(self.inner) > 0

    def __iter__(self) -> Iterator[_T]:
        return iter(self.inner)

    def __contains__(self, item: Any) -> bool:
        return item in self.inner

    @overload
    def __getitem__(self, key: SupportsIndex) -> _T: ...

    @overload
    def __getitem__(self, key: slice) -> list[_T]: ...

    def __getitem__(self, key: Union[SupportsIndex, slice]) -> Union[_T, list[_T]]:
        # plain list indexing, neither cyclic nor relative to the cursor
        return self.inner[key]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CycleCursor):
            return NotImplemented
        return self.inner == other.inner and self.pos == other.pos

    __hash__ = None

    def __repr__(self) -> str:
        return f'{type(self).__name__}(inner={self.inner!r}, pos={self.pos!r})'


if __name__ == '__main__':
    def main() -> None:
        from cyclecursor.core.util.defs import PACKAGE_NAME
        from cyclecursor.core.util.loggings import apply_default_config

        apply_default_config()
        demo_logger = getLogger(PACKAGE_NAME)
        cursor = CycleCursor([1, 2, 3, 4])
        for _ in range(5):
            cursor.cycle_next()
            demo_logger.info(f'pos={cursor.pos} value={cursor.get()} peek(-1)={cursor.peek(-1)}')
    main()
