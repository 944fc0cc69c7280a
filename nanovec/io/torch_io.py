import logging
from typing import Dict

import torch

from nanovec.core.buffer import Buffer
from nanovec.core.linear import LinearType
from nanovec.dtype.dtype import DataType, FLOAT32, FLOAT64, INT32, INT64

logger = logging.getLogger(__name__)

TORCH_DTYPES: Dict[DataType, torch.dtype] = {
    FLOAT32: torch.float32,
    FLOAT64: torch.float64,
    INT32: torch.int32,
    INT64: torch.int64,
}

NANOVEC_DTYPES: Dict[torch.dtype, DataType] = {v: k for k, v in TORCH_DTYPES.items()}


def to_tensor(linear: LinearType) -> torch.Tensor:
    """Copy the elements of a buffer or view, in index order, into a new 1-D tensor."""
    if not isinstance(linear, LinearType):
        raise TypeError(f"to_tensor expects a linear container, got {type(linear).__name__}")
    return torch.tensor(linear.to_list(), dtype=TORCH_DTYPES[linear.dtype])


def from_tensor(tensor: torch.Tensor) -> Buffer:
    if not isinstance(tensor, torch.Tensor):
        raise TypeError(f"from_tensor expects torch.Tensor, got {type(tensor).__name__}")
    if tensor.dim() != 1:
        raise ValueError(f"Only 1-D tensors can be converted, got shape {tuple(tensor.shape)}")
    if tensor.dtype not in NANOVEC_DTYPES:
        raise ValueError(f"Unsupported tensor dtype: {tensor.dtype}")

    if tensor.device.type != "cpu":
        logger.debug(f"Copying tensor from {tensor.device} to cpu")
    values = tensor.detach().cpu().tolist()
    return Buffer.from_list(values, dtype=NANOVEC_DTYPES[tensor.dtype])
