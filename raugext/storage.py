"""Sample playback from an in-memory buffer loaded from WAV files."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np
from scipy.signal import resample_poly

__all__ = ["Sample"]

_FORMAT_PCM = 1
_FORMAT_FLOAT = 3
_FORMAT_EXTENSIBLE = 0xFFFE
_USIZE_MAX = 2**64 - 1


def _read_wav(path: Union[str, PathLike]) -> Tuple[np.ndarray, float]:
    """Read the first channel of a WAV file and its sample rate."""
    data = Path(path).read_bytes()
    if len(data) < 12 or data[:4] != b"RIFF" or data[8:12] != b"WAVE":
        raise ValueError("not a RIFF WAVE file")

    fmt: Optional[bytes] = None
    payload: Optional[bytes] = None
    pos = 12
    while pos + 8 <= len(data):
        chunk_id = data[pos : pos + 4]
        (size,) = struct.unpack_from("<I", data, pos + 4)
        body = data[pos + 8 : pos + 8 + size]
        if chunk_id == b"fmt ":
            fmt = body
        elif chunk_id == b"data":
            payload = body
        pos += 8 + size + (size & 1)

    if fmt is None or len(fmt) < 16:
        raise ValueError("missing or short fmt chunk")
    if payload is None:
        raise ValueError("missing data chunk")

    tag, channels, rate, _, block_align, bits = struct.unpack_from("<HHIIHH", fmt)
    if tag == _FORMAT_EXTENSIBLE:
        if len(fmt) < 26:
            raise ValueError("short extensible fmt chunk")
        (tag,) = struct.unpack_from("<H", fmt, 24)
    if channels == 0 or block_align == 0 or block_align % channels:
        raise ValueError("invalid channel layout")

    width = block_align // channels
    usable = len(payload) - len(payload) % block_align
    frames = np.frombuffer(payload[:usable], dtype=np.uint8).reshape(-1, channels, width)
    first = np.ascontiguousarray(frames[:, 0, :])

    if tag == _FORMAT_PCM:
        if width == 1:
            ints = first[:, 0].astype(np.int64) - 128
        elif width <= 4:
            ints = np.zeros(len(first), dtype=np.int64)
            for shift, column in enumerate(first.T):
                ints |= column.astype(np.int64) << (8 * shift)
            top = 1 << (8 * width - 1)
            ints = np.where(ints >= top, ints - (top << 1), ints)
        else:
            raise ValueError(f"unsupported sample width: {width} bytes")
        buf = ints.astype(np.float32) / np.float32(1 << bits)
    elif tag == _FORMAT_FLOAT:
        if width != 4:
            raise ValueError(f"unsupported float sample width: {width} bytes")
        buf = first.view("<f4").reshape(-1).astype(np.float32)
    else:
        raise ValueError(f"unsupported WAV format tag: {tag}")

    return buf, float(rate)


def _resample(buf: np.ndarray, input_rate: float, output_rate: float) -> np.ndarray:
    src, dst = int(input_rate), int(output_rate)
    if src <= 0 or dst <= 0:
        raise ValueError("sample rates must be positive")
    if len(buf) == 0:
        return np.zeros(0, dtype=np.float32)
    g = math.gcd(src, dst)
    return resample_poly(buf, dst // g, src // g).astype(np.float32)


def _to_usize(x: float) -> int:
    """Saturating float-to-unsigned conversion."""
    if math.isnan(x) or x <= 0.0:
        return 0
    if math.isinf(x):
        return _USIZE_MAX
    return min(int(x), _USIZE_MAX)


@dataclass(eq=False)
class Sample:
    """Mono sample buffer played back with linear interpolation."""

    buf: np.ndarray
    sample_rate: float
    index: float = 0.0
    wrap: bool = False

    def __post_init__(self) -> None:
        self.buf = np.asarray(self.buf, dtype=np.float32)

    @classmethod
    def load(cls, path: Union[str, PathLike]) -> "Sample":
        """Load the first channel of a WAV file."""
        buf, rate = _read_wav(path)
        return cls(buf=buf, sample_rate=rate)

    def length(self) -> float:
        """Number of frames in the buffer."""
        return float(len(self.buf))

    def allocate(self, sample_rate: float, block_size: int) -> None:
        """Resample the buffer to ``sample_rate`` if it differs."""
        if sample_rate <= 0.0 or sample_rate == self.sample_rate:
            return
        self.buf = _resample(self.buf, self.sample_rate, sample_rate)
        self.sample_rate = sample_rate

    def process(
        self, index: Optional[float] = None, wrap: Optional[bool] = None
    ) -> Tuple[float, float]:
        """Return the interpolated value at ``index`` and the buffer length."""
        index = self.index if index is None else index
        wrap = self.wrap if wrap is None else wrap
        n = len(self.buf)

        if wrap:
            index = math.fmod(index, n) if n and math.isfinite(index) else math.nan

        lo = _to_usize(math.floor(index) if math.isfinite(index) else index)
        hi = _to_usize(math.ceil(index) if math.isfinite(index) else index)
        t = index - float(lo)
        lo_value = float(self.buf[lo]) if lo < n else 0.0
        hi_value = float(self.buf[hi]) if hi < n else 0.0
        value = lo_value * (1.0 - t) + hi_value * t
        return value, float(n)