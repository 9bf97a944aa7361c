# parser/cursor.py

import struct
from collections.abc import Iterator
from contextlib import contextmanager

from .errors import OutOfBoundsError, UninitializedByteOrderError
from .models import ByteOrder

_FORMATS = {
    ByteOrder.BIG: (">H", ">I"),
    ByteOrder.LITTLE: ("<H", "<I"),
}


class Cursor:
    """Linear reader over an immutable byte buffer.

    ``pos`` may be set anywhere by ``seek``; only reads are bounds checked.
    16- and 32-bit reads need ``byte_order`` to be set first.
    """

    def __init__(
        self,
        data: bytes | bytearray | memoryview,
        byte_order: ByteOrder | None = None,
    ) -> None:
        self._buf = memoryview(data).cast("B")
        self.pos = 0
        self.byte_order = byte_order

    def __len__(self) -> int:
        return len(self._buf)

    def tell(self) -> int:
        return self.pos

    def remaining(self) -> int:
        return len(self._buf) - self.pos

    def seek(self, pos: int) -> None:
        self.pos = pos

    def skip(self, n: int) -> None:
        self.seek(self.pos + n)

    @contextmanager
    def detour(self, pos: int) -> Iterator["Cursor"]:
        """Temporarily seek to ``pos``; the old position is restored on exit."""
        saved = self.pos
        self.seek(pos)
        try:
            yield self
        finally:
            self.seek(saved)

    def read_bytes(self, n: int) -> bytes:
        start = self.pos
        end = start + n
        if n < 0 or start < 0 or end > len(self._buf):
            raise OutOfBoundsError(
                f"Cannot read {n} bytes at offset {start:#x} "
                f"(buffer is {len(self._buf):#x} bytes)"
            )
        self.pos = end
        return self._buf[start:end].tobytes()

    def read_text(self, n: int) -> str:
        return self.read_bytes(n).decode("latin-1")

    def read_u8(self) -> int:
        return self.read_bytes(1)[0]

    def read_u16(self) -> int:
        return self._unpack(0, 2)

    def read_u32(self) -> int:
        return self._unpack(1, 4)

    def _unpack(self, which: int, size: int) -> int:
        if self.byte_order is None:
            raise UninitializedByteOrderError(
                f"{size * 8}-bit read at offset {self.pos:#x} before byte order was set"
            )
        fmt = _FORMATS[self.byte_order][which]
        return struct.unpack(fmt, self.read_bytes(size))[0]
