from typing import Dict, Tuple, Union


class DataType:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return self.name


FLOAT32 = DataType("float32")
FLOAT64 = DataType("float64")
INT32 = DataType("int32")
INT64 = DataType("int64")

FLOAT_TYPES = (FLOAT32, FLOAT64)
INT_TYPES = (INT32, INT64)

# native `memoryview.cast` formats, so item sizes are fixed across platforms
FMT: Dict[DataType, Tuple[str, int]] = {
    FLOAT32: ("f", 4),
    FLOAT64: ("d", 8),
    INT32: ("i", 4),
    INT64: ("q", 8),
}

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

INT_RANGES: Dict[DataType, Tuple[int, int]] = {
    INT32: (INT32_MIN, INT32_MAX),
    INT64: (INT64_MIN, INT64_MAX),
}

DEFAULT_DTYPE = FLOAT64

PrimitiveType = Union[int, float]
