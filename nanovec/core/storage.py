from dataclasses import dataclass

from nanovec.dtype.dtype import DataType, FMT


@dataclass
class Storage:
    data: memoryview

    @classmethod
    def allocate(cls, dtype: DataType, capacity: int) -> "Storage":
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        fmt, item_size = FMT[dtype]
        return cls.from_bytearray(bytearray(capacity * item_size), fmt)

    @classmethod
    def from_bytearray(cls, data: bytearray, fmt: str) -> "Storage":
        raw = memoryview(data)
        if raw.nbytes % FMT_SIZES[fmt] != 0:
            raise ValueError(f"Byte length {raw.nbytes} is not a multiple of item size for format '{fmt}'")
        return cls(raw.cast(fmt))

    def window(self, length: int, readonly: bool = False) -> memoryview:
        if length < 0 or length > len(self.data):
            raise ValueError(f"window length {length} out of range [0, {len(self.data)}]")
        window = self.data[:length]
        return window.toreadonly() if readonly else window

    def copy_into(self, other: "Storage", length: int) -> None:
        assert length <= len(self.data) and length <= len(other.data), (
            f"Cannot copy {length} slots between storages of {len(self.data)} and {len(other.data)}"
        )
        other.data[:length] = self.data[:length]


FMT_SIZES = {fmt: item_size for fmt, item_size in FMT.values()}
