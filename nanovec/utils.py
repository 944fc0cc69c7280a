from operator import index as _index
from typing import Tuple


def check_index(i: int, n: int) -> int:
    if n < 0:
        raise ValueError(f"length must be >= 0, got {n}")
    i = _index(i)
    # negative indices are not wrapped: the valid range is exactly [0, n)
    if i < 0 or i >= n:
        raise IndexError(f"index {i} out of range [0, {n})")
    return i


def check_bound(i: int, n: int) -> int:
    i = _index(i)
    if i < 0 or i > n:
        raise IndexError(f"slice bound {i} out of range [0, {n}]")
    return i


def strided_length(start: int, end: int, step: int) -> int:
    if step == 0:
        raise ValueError("step must be non-zero")
    return len(range(start, end, step))


def resolve_slice(key: slice, n: int) -> Tuple[int, int, int]:
    """
    Resolve `key` against `[0, n)` and return `(start, stop, step)`.

    Bounds are neither clamped nor wrapped: an explicit start or stop outside
    `[0, n]` raises ``IndexError``. With a negative step, omitted bounds run from
    `n - 1` down to before `0`, so the default stop is `-1`.
    """
    step = 1 if key.step is None else _index(key.step)
    if step == 0:
        raise ValueError("slice step cannot be zero")

    if step > 0:
        start = 0 if key.start is None else check_bound(key.start, n)
        stop = n if key.stop is None else check_bound(key.stop, n)
    else:
        start = n - 1 if key.start is None else check_bound(key.start, n)
        stop = -1 if key.stop is None else check_bound(key.stop, n)

    # a reversed slice may not start at the one-past-last bound
    if strided_length(start, stop, step) > 0 and start >= n:
        raise IndexError(f"slice start {start} out of range [0, {n})")
    return start, stop, step
