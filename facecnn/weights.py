"""Reading and writing named arrays in the safetensors file format."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from pathlib import Path

import numpy as np

_DTYPES = {
    "F64": np.float64,
    "F32": np.float32,
    "F16": np.float16,
    "I64": np.int64,
    "I32": np.int32,
    "I16": np.int16,
    "I8": np.int8,
    "U64": np.uint64,
    "U32": np.uint32,
    "U16": np.uint16,
    "U8": np.uint8,
    "BOOL": np.bool_,
}
_NAMES = {np.dtype(dtype): name for name, dtype in _DTYPES.items()}
_ALIGNMENT = 8
_METADATA_KEY = "__metadata__"


def save_tensors(path: Path, tensors: Mapping[str, np.ndarray]) -> None:
    """Write the named arrays to ``path``."""
    header: dict[str, dict] = {}
    chunks: list[bytes] = []
    offset = 0
    for name in sorted(tensors):
        array = np.asarray(tensors[name])
        dtype_name = _NAMES.get(array.dtype.newbyteorder("="))
        if dtype_name is None:
            raise ValueError(f"unsupported dtype {array.dtype} for tensor {name!r}")
        data = np.ascontiguousarray(array, dtype=array.dtype.newbyteorder("<")).tobytes()
        header[name] = {
            "dtype": dtype_name,
            "shape": list(array.shape),
            "data_offsets": [offset, offset + len(data)],
        }
        chunks.append(data)
        offset += len(data)
    encoded = json.dumps(header, separators=(",", ":")).encode("utf-8")
    encoded += b" " * (-len(encoded) % _ALIGNMENT)
    with open(path, "wb") as handle:
        handle.write(len(encoded).to_bytes(8, "little"))
        handle.write(encoded)
        for chunk in chunks:
            handle.write(chunk)


def load_tensors(path: Path) -> dict[str, np.ndarray]:
    """Read every named array stored in ``path``."""
    raw = Path(path).read_bytes()
    if len(raw) < 8:
        raise ValueError("file too short for a tensor header")
    header_len = int.from_bytes(raw[:8], "little")
    data_start = 8 + header_len
    if data_start > len(raw):
        raise ValueError("header length exceeds file size")
    header = json.loads(raw[8:data_start].decode("utf-8"))
    if not isinstance(header, dict):
        raise ValueError("tensor header must be an object")
    buffer = raw[data_start:]
    tensors: dict[str, np.ndarray] = {}
    for name, info in header.items():
        if name == _METADATA_KEY:
            continue
        try:
            dtype = np.dtype(_DTYPES[info["dtype"]]).newbyteorder("<")
            shape = tuple(int(dim) for dim in info["shape"])
            begin, end = (int(value) for value in info["data_offsets"])
        except (KeyError, TypeError, ValueError) as error:
            raise ValueError(f"malformed entry for tensor {name!r}") from error
        expected = math.prod(shape) * dtype.itemsize
        if begin < 0 or end > len(buffer) or end - begin != expected:
            raise ValueError(f"invalid data offsets for tensor {name!r}")
        array = np.frombuffer(buffer[begin:end], dtype=dtype).reshape(shape)
        tensors[name] = array.astype(dtype.newbyteorder("="))
    return tensors