from typing import Union

from nanovec.core.buffer import Buffer
from nanovec.core.linear import LinearType
from nanovec.dtype.dtype import DataType, PrimitiveType
from nanovec.utils import check_index, strided_length


class View(LinearType):
    """
    Non-owning strided window over a :class:`Buffer`.

    Element ``i`` of the view is element ``start_index + i * step`` of ``base``.
    Reads and writes go straight to the base storage, so every view over a
    buffer observes the live state of that buffer.

    A view over another view is rebased onto the root buffer with composed
    offsets, so ``buf[::2][::3] == buf[::6]``.

    Bounds are validated once, at construction. Shrinking the base afterwards
    (only possible through ``swap``) leaves the view undefined; the caller must
    not use it until the base is large enough again.
    """

    def __init__(self, base: Union[Buffer, "View"], start: int, end: int, step: int = 1):
        if not isinstance(base, (Buffer, View)):
            raise TypeError(f"View base must be a Buffer or View, got {type(base).__name__}")

        length = strided_length(start, end, step)
        if length > 0:
            last = start + (length - 1) * step
            # a reversed view may end just before index 0
            in_range = base.is_index_valid(start) and base.is_index_valid(last) and -1 <= end <= base.count
            if not in_range:
                raise IndexError(f"range({start}, {end}, {step}) out of range [0, {base.count})")

        if isinstance(base, View):
            end = base.start_index + end * base.step
            start = base.start_index + start * base.step
            step = base.step * step
            base = base.base

        self.base = base
        self._start = start
        self._end = end
        self._step = step
        self._count = length

    @property
    def count(self) -> int:
        return self._count

    @property
    def start_index(self) -> int:
        return self._start

    @property
    def step(self) -> int:
        return self._step

    @property
    def end_index(self) -> int:
        """Exclusive end in base index space, as passed by the caller; `-1` for a reversed view ending at 0."""
        return self._end

    @property
    def dtype(self) -> DataType:
        return self.base.dtype

    def _get(self, i: int) -> PrimitiveType:
        return self.base._get(check_index(self._start + i * self._step, self.base.count))

    def _set(self, i: int, value: PrimitiveType) -> None:
        self.base._set(check_index(self._start + i * self._step, self.base.count), value)

    def _slice(self, start: int, stop: int, step: int) -> "View":
        return View(self, start, stop, step)

    def _window(self, readonly: bool) -> memoryview:
        return self.base._window(readonly)

    def __repr__(self) -> str:
        return f"View({self.to_list()}, start={self._start}, end={self.end_index}, step={self._step})"
