from typing import Iterable

from nanovec.dtype.dtype import (
    DataType,
    FMT,
    FLOAT_TYPES,
    INT_TYPES,
    INT_RANGES,
    FLOAT64,
    INT64,
    PrimitiveType,
)


def infer_primitive_dtype(values: Iterable[PrimitiveType]) -> DataType:
    saw_float = False
    saw_int = False

    for v in values:
        if isinstance(v, float):
            saw_float = True
        elif isinstance(v, int):
            # bool is a subclass of int
            saw_int = True
        else:
            raise ValueError(f"Unsupported primitive type: {type(v).__name__}")

    if saw_float:
        return FLOAT64
    if saw_int:
        return INT64

    raise ValueError("Cannot infer primitive dtype from empty values")


def coerce_value(dtype: DataType, value: PrimitiveType) -> PrimitiveType:
    if dtype in FLOAT_TYPES:
        if isinstance(value, (bool, int, float)):
            return float(value)
        raise TypeError(f"Float dtype expects float/int/bool, got {type(value).__name__}.")

    if dtype in INT_TYPES:
        if isinstance(value, float):
            raise TypeError(
                "Float value provided for integer dtype. Use FLOAT32/FLOAT64 or omit dtype for inference."
            )
        if not isinstance(value, int):
            raise TypeError(f"Integer dtype expects int/bool, got {type(value).__name__}.")
        low, high = INT_RANGES[dtype]
        if not (low <= value <= high):
            raise OverflowError(f"Value {value} out of {dtype} range")
        return int(value)

    raise TypeError(f"Unsupported dtype: {dtype}")


def check_dtype(dtype: DataType) -> DataType:
    if dtype not in FMT:
        raise ValueError(f"Unsupported data type: {dtype}")
    return dtype
