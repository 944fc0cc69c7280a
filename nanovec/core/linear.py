from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Union

from nanovec.dtype.dtype import DataType, PrimitiveType
from nanovec.dtype.dtype_inference import coerce_value
from nanovec.utils import check_index, resolve_slice


class LinearType(ABC):
    """
    One-dimensional container whose elements live in contiguous typed storage.

    Element ``i`` is stored at slot ``start_index + i * step`` of the window
    yielded by :meth:`reading` and :meth:`writing`. Anything implementing this
    interface can be materialized with ``Buffer.from_linear`` and compared with
    any other linear container.
    """

    @property
    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def start_index(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def step(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def dtype(self) -> DataType:
        raise NotImplementedError

    @property
    @abstractmethod
    def end_index(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def _get(self, i: int) -> PrimitiveType:
        raise NotImplementedError

    @abstractmethod
    def _set(self, i: int, value: PrimitiveType) -> None:
        raise NotImplementedError

    @abstractmethod
    def _slice(self, start: int, stop: int, step: int):
        raise NotImplementedError

    @abstractmethod
    def _window(self, readonly: bool) -> memoryview:
        raise NotImplementedError

    @contextmanager
    def reading(self) -> Iterator[memoryview]:
        """
        Borrow a read-only window over the owning storage for the duration of a `with` block.

        The window is released on exit, so a reference that escapes the block
        raises ``ValueError`` when used.
        """
        window = self._window(readonly=True)
        try:
            yield window
        finally:
            window.release()

    @contextmanager
    def writing(self) -> Iterator[memoryview]:
        """Borrow a writable window over the owning storage for the duration of a `with` block."""
        window = self._window(readonly=False)
        try:
            yield window
        finally:
            window.release()

    def is_index_valid(self, i: int) -> bool:
        return 0 <= i < self.count

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[PrimitiveType]:
        for i in range(self.count):
            yield self._get(i)

    def __getitem__(self, key: Union[int, slice]):
        if isinstance(key, slice):
            return self._slice(*resolve_slice(key, self.count))

        if not hasattr(key, "__index__"):
            raise TypeError(f"Invalid index type for {self.__class__.__name__}: {type(key).__name__}")
        return self._get(check_index(key, self.count))

    def __setitem__(self, key: Union[int, slice], value):
        if isinstance(key, slice):
            self._assign(range(*resolve_slice(key, self.count)), value)
            return

        if not hasattr(key, "__index__"):
            raise TypeError(f"Invalid index type for {self.__class__.__name__}: {type(key).__name__}")
        i = check_index(key, self.count)
        self._set(i, coerce_value(self.dtype, value))

    def _assign(self, indices: range, values: Iterable[PrimitiveType]) -> None:
        # read the whole right-hand side first, it may alias this container
        coerced = [coerce_value(self.dtype, v) for v in values]
        if len(coerced) != len(indices):
            raise ValueError(f"Cannot assign {len(coerced)} values to a range of {len(indices)} elements")
        for i, v in zip(indices, coerced):
            self._set(i, v)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinearType):
            return NotImplemented
        if self is other:
            return True
        return self.count == other.count and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self) + "]"

    def to_list(self) -> List[PrimitiveType]:
        return list(self)

    def to_buffer(self):
        from nanovec.core.buffer import Buffer

        return Buffer.from_linear(self)

    def to_tensor(self):
        from nanovec.io.torch_io import to_tensor

        return to_tensor(self)
