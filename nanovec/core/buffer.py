import logging
from typing import Callable, Iterable, Optional

from nanovec.core.linear import LinearType
from nanovec.core.storage import Storage
from nanovec.dtype.dtype import DataType, DEFAULT_DTYPE, PrimitiveType
from nanovec.dtype.dtype_inference import check_dtype, coerce_value, infer_primitive_dtype

logger = logging.getLogger(__name__)


class Buffer(LinearType):
    """
    Fixed-capacity contiguous store of homogeneous numbers.

    A Buffer has reference semantics: binding it to another name does not copy
    anything, and a mutation through either name is visible through both. Use
    :meth:`copy` to get independent storage. Slicing returns a :class:`View`
    that reads and writes this Buffer's storage in place.

    ``count`` is the number of valid elements and never exceeds ``capacity``.
    Slots past ``count`` are reserved for :meth:`append` and :meth:`extend`;
    capacity is never grown implicitly.

    Examples:
        >>> a = Buffer.from_list([1.0, 2.0, 3.0])
        >>> b = a
        >>> b[0] = 4.0
        >>> a[0]
        4.0
        >>> c = a.copy()
        >>> c[0] = 1.0
        >>> a[0]
        4.0
    """

    def __init__(self, capacity: int = 0, dtype: DataType = DEFAULT_DTYPE):
        self._dtype = check_dtype(dtype)
        self._storage = Storage.allocate(dtype, capacity)
        self._capacity = capacity
        self._count = 0
        logger.debug(f"Allocated buffer with capacity={capacity}, dtype={dtype}")

    @classmethod
    def empty(cls, count: int, dtype: DataType = DEFAULT_DTYPE) -> "Buffer":
        """Construct a buffer with ``count == capacity``. Its slots are zero-filled."""
        buffer = cls(count, dtype)
        buffer._count = count
        return buffer

    @classmethod
    def from_list(cls, values: Iterable[PrimitiveType], dtype: Optional[DataType] = None) -> "Buffer":
        values = list(values)
        if dtype is not None:
            target = dtype
        else:
            target = infer_primitive_dtype(values) if values else DEFAULT_DTYPE
        check_dtype(target)

        coerced = [coerce_value(target, v) for v in values]
        buffer = cls.empty(len(coerced), target)
        data = buffer._storage.data
        for i, v in enumerate(coerced):
            data[i] = v
        return buffer

    @classmethod
    def from_linear(cls, source: LinearType) -> "Buffer":
        """
        Materialize any linear container into a new buffer.

        Elements are read at ``source.start_index + i * source.step`` through the
        source's read window, so strided views are flattened.
        """
        if not isinstance(source, LinearType):
            raise TypeError(
                f"Expected a linear container, got {type(source).__name__}. Use `Buffer.from_list` for sequences."
            )

        count = source.count
        buffer = cls.empty(count, source.dtype)
        with source.reading() as src, buffer.writing() as dst:
            for i in range(count):
                dst[i] = src[source.start_index + i * source.step]

        logger.debug(f"Materialized {count} elements from {source.__class__.__name__}")
        return buffer

    @classmethod
    def full(cls, count: int, value: PrimitiveType, dtype: Optional[DataType] = None) -> "Buffer":
        target = dtype if dtype is not None else infer_primitive_dtype([value])
        return cls.from_fn(count, lambda: value, target)

    @classmethod
    def from_fn(cls, count: int, fn: Callable[[], PrimitiveType], dtype: DataType = DEFAULT_DTYPE) -> "Buffer":
        """Construct a buffer whose ``i``-th slot is the ``i``-th result of ``fn()``."""
        buffer = cls.empty(count, dtype)
        for i in range(count):
            buffer[i] = fn()
        return buffer

    @classmethod
    def from_tensor(cls, tensor) -> "Buffer":
        from nanovec.io.torch_io import from_tensor

        return from_tensor(tensor)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def start_index(self) -> int:
        return 0

    @property
    def step(self) -> int:
        return 1

    @property
    def end_index(self) -> int:
        return self._count

    @property
    def dtype(self) -> DataType:
        return self._dtype

    @property
    def storage(self) -> Storage:
        return self._storage

    def _get(self, i: int) -> PrimitiveType:
        return self._storage.data[i]

    def _set(self, i: int, value: PrimitiveType) -> None:
        self._storage.data[i] = value

    def _slice(self, start: int, stop: int, step: int):
        from nanovec.core.view import View

        return View(self, start, stop, step)

    def _window(self, readonly: bool) -> memoryview:
        return self._storage.window(self._count, readonly=readonly)

    def copy(self) -> "Buffer":
        duplicate = self.__class__(self._capacity, self._dtype)
        self._storage.copy_into(duplicate._storage, self._count)
        duplicate._count = self._count
        logger.debug(f"Copied {self._count} elements into new storage of capacity={self._capacity}")
        return duplicate

    def __copy__(self) -> "Buffer":
        return self.copy()

    def __deepcopy__(self, memo) -> "Buffer":
        return self.copy()

    def append(self, value: PrimitiveType) -> None:
        if self._count + 1 > self._capacity:
            raise BufferError(f"Cannot append to a full buffer (count={self._count}, capacity={self._capacity})")
        self._storage.data[self._count] = coerce_value(self._dtype, value)
        self._count += 1

    def extend(self, values: Iterable[PrimitiveType]) -> None:
        coerced = [coerce_value(self._dtype, v) for v in values]
        if self._count + len(coerced) > self._capacity:
            raise BufferError(
                f"Cannot extend by {len(coerced)} elements (count={self._count}, capacity={self._capacity})"
            )

        data = self._storage.data
        for offset, v in enumerate(coerced, start=self._count):
            data[offset] = v
        self._count += len(coerced)

    def replace_range(self, sub_range: range, values: Iterable[PrimitiveType]) -> None:
        """Overwrite ``sub_range`` in place with exactly ``len(sub_range)`` values; ``count`` is unchanged."""
        if not isinstance(sub_range, range):
            raise TypeError(f"Expected a range, got {type(sub_range).__name__}")
        if sub_range.step != 1:
            raise ValueError(f"Range step must be 1, got {sub_range.step}")
        if not (0 <= sub_range.start <= sub_range.stop <= self._count):
            raise IndexError(f"range [{sub_range.start}, {sub_range.stop}) out of range [0, {self._count})")
        self._assign(sub_range, values)

    def __repr__(self) -> str:
        return f"Buffer({self.to_list()}, dtype={self._dtype}, capacity={self._capacity})"


def swap(lhs: Buffer, rhs: Buffer) -> None:
    """Exchange the storage, capacity, count and dtype of two buffers without copying elements."""
    if not isinstance(lhs, Buffer) or not isinstance(rhs, Buffer):
        raise TypeError(f"swap expects two buffers, got {type(lhs).__name__} and {type(rhs).__name__}")

    lhs._storage, rhs._storage = rhs._storage, lhs._storage
    lhs._capacity, rhs._capacity = rhs._capacity, lhs._capacity
    lhs._count, rhs._count = rhs._count, lhs._count
    lhs._dtype, rhs._dtype = rhs._dtype, lhs._dtype
    logger.debug(f"Swapped buffers of count {rhs._count} and {lhs._count}")
