"""ROT128 byte cipher: every byte is rotated by 128, so encoding and decoding are the same."""

from __future__ import annotations

import io
from typing import BinaryIO

_TABLE = bytes((value + 128) % 256 for value in range(256))


def rot128(data: bytes | bytearray | memoryview) -> bytes:
    """Rotate every byte by 128; applying it twice gives back the input."""
    return bytes(data).translate(_TABLE)


class Rot128Reader(io.RawIOBase):
    """A readable stream that decodes ROT128 data from an underlying binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        super().__init__()
        self._stream = stream

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[override]
        view = memoryview(buffer).cast("B")
        data = self._stream.read(len(view))
        if not data:
            return 0
        view[: len(data)] = rot128(data)
        return len(data)

    def read(self, size: int | None = -1) -> bytes:  # type: ignore[override]
        """Read and decode up to ``size`` bytes, or everything if ``size`` is negative."""
        if size is None or size < 0:
            data = self._stream.read()
        else:
            data = self._stream.read(size)
        return rot128(data or b"")

    def close(self) -> None:
        """Close this reader and the underlying stream."""
        if not self.closed:
            try:
                self._stream.close()
            finally:
                super().close()


class Rot128Writer(io.RawIOBase):
    """A writable stream that encodes data with ROT128 into an underlying binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        super().__init__()
        self._stream = stream

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        """Encode and write ``data``; return the number of bytes taken."""
        chunk = bytes(data)
        self._stream.write(rot128(chunk))
        return len(chunk)


def open_and_decode_rot128_file(path) -> Rot128Reader:
    """Open a ROT128-encoded file and return a decoding reader; closing it closes the file."""
    file = open(path, "rb")
    try:
        return Rot128Reader(file)
    except Exception:
        file.close()
        raise