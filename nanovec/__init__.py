from nanovec.core.buffer import Buffer, swap
from nanovec.core.linear import LinearType
from nanovec.core.view import View
from nanovec.dtype.dtype import DataType, DEFAULT_DTYPE, FLOAT32, FLOAT64, INT32, INT64

__all__ = [
    "Buffer",
    "View",
    "LinearType",
    "swap",
    "DataType",
    "DEFAULT_DTYPE",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
]
