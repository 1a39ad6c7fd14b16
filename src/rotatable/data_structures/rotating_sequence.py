from itertools import islice
from operator import index as as_index
from typing import (
    List,  # TODO: Deprecated since version 3.9. See Generic Alias Type and PEP 585.
)
from typing import Union  # TODO: Unnecessary since version 3.10. See PEP 604.
from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

import numpy as np
from attrs import define, field
from cytoolz import concat

_T = TypeVar("_T")


@define(eq=False, repr=False, slots=False)
class RotatingSequence(Sequence[_T], Generic[_T]):
    """
    A list whose view can be rotated in O(1) by moving a logical start offset
    over a backing store that stays put in memory.

    Logical index i lives at physical index (start_index + i) mod len.

    https://stackoverflow.com/a/2167962/20015297
    """

    _storage: List[_T] = field(factory=list, converter=list)
    _start_index: int = field(default=0, init=False)
    _length: int = field(default=0, init=False)

    def __attrs_post_init__(self) -> None:
        self._length = len(self._storage)

    @classmethod
    def from_array(cls, array: Union[Tuple[_T, ...], np.ndarray]) -> "RotatingSequence[_T]":
        """Copy a fixed-size array. ndarrays are unwrapped to native Python scalars."""
        if isinstance(array, np.ndarray):
            return cls(array.tolist())
        return cls(array)

    @property
    def start_index(self) -> int:
        return self._start_index

    def is_empty(self) -> bool:
        return self._length == 0

    def shift_forward(self, steps: int) -> None:
        """
        Bring the last `steps` elements to the front.

        [1, 2, 3, 4, 5] -> [4, 5, 1, 2, 3] for steps = 2
        """
        shift = as_index(steps)
        if self.is_empty():
            return
        self._start_index = (self._start_index - shift % self._length) % self._length

    def shift_backward(self, steps: int) -> None:
        """
        Bring the element at logical position `steps` to the front.

        [1, 2, 3, 4, 5] -> [3, 4, 5, 1, 2] for steps = 2
        """
        shift = as_index(steps)
        if self.is_empty():
            return
        self._start_index = (self._start_index + shift % self._length) % self._length

    def _physical_index(self, idx: Any) -> int:
        try:
            i = as_index(idx)
        except TypeError:
            raise TypeError(
                f"{type(self).__name__} indices must be integers, not {type(idx).__name__}"
            ) from None
        if i < 0:
            i += self._length
        if not 0 <= i < self._length:
            raise IndexError(f"{type(self).__name__} index out of range")
        tail = self._length - self._start_index
        return self._start_index + i if i < tail else i - tail

    def __getitem__(self, idx: int) -> _T:
        return self._storage[self._physical_index(idx)]

    def __setitem__(self, idx: int, value: _T) -> None:
        self._storage[self._physical_index(idx)] = value

    def get(self, idx: int) -> _T:
        return self[idx]

    def set(self, idx: int, value: _T) -> None:
        self[idx] = value

    def index_via_array(self, indices: Iterable[int]) -> List[_T]:
        """Fetch the elements at `indices`, in that order. Repeats are allowed."""
        return [self[idx] for idx in indices]

    def update_via_array(self, indices: Iterable[int], new_values: Iterable[_T]) -> None:
        # Extra indices or values past the shorter of the two are ignored.
        for idx, value in zip(indices, new_values):
            self[idx] = value

    def push(self, element: _T) -> None:
        """
        Append `element` as the logical last element.

        It is inserted physically in front of the start offset, and the offset
        steps over it, so it wraps round to the logical end.
        """
        self._storage.insert(self._start_index, element)
        self._length += 1
        self._start_index = (self._start_index + 1) % self._length

    def extend(self, items: Iterable[_T]) -> None:
        extension = list(items)
        if not extension:
            return
        # head + extension + tail
        self._storage[self._start_index : self._start_index] = extension
        self._length += len(extension)
        self._start_index = (self._start_index + len(extension)) % self._length

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[_T]:
        return concat(
            (
                islice(self._storage, self._start_index, None),
                islice(self._storage, self._start_index),
            )
        )

    def to_list(self) -> List[_T]:
        return list(self)

    def to_numpy(self, dtype: Optional[np.dtype] = None) -> np.ndarray:
        return np.array(self.to_list(), dtype=dtype)

    def copy(self) -> "RotatingSequence[_T]":
        duplicate = type(self)(self._storage)
        duplicate._start_index = self._start_index
        return duplicate

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotatingSequence):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __str__(self) -> str:
        return str(self.to_list())
