"""Reading of paged files where every page ends with a CRC-32C checksum."""

from __future__ import annotations

from typing import BinaryIO

_CHECKSUM_SIZE = 4
_ALIGNMENT_SIZE = 4
_MAX_PAGE_SIZE = 1024 * 1024
_POLYNOMIAL = 0x82F63B78


def _make_table() -> list[int]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = (c >> 1) ^ _POLYNOMIAL if c & 1 else c >> 1
        table.append(c)
    return table


_TABLE = _make_table()


def crc32c(data: bytes) -> int:
    """Return the CRC-32C (Castagnoli) checksum of ``data``."""
    crc = 0xFFFFFFFF
    table = _TABLE
    for byte in data:
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF


class PagedReader:
    """Reads the logical content of a paged file, verifying page checksums.

    Every physical page carries a four byte big endian CRC-32C at its end.
    The reader hides those checksums and exposes a continuous logical stream.
    """

    def __init__(self, stream: BinaryIO, page_size: int) -> None:
        if page_size > _MAX_PAGE_SIZE:
            raise ValueError(
                f"Page size {page_size} is bigger than the allowed maximum "
                f"page size of {_MAX_PAGE_SIZE} bytes"
            )
        if page_size <= _CHECKSUM_SIZE:
            raise ValueError(
                f"Page size {page_size} needs to be bigger than checksum "
                f"({_CHECKSUM_SIZE} bytes)"
            )
        phy_size = stream.seek(0, 2)
        if phy_size == 0:
            raise ValueError("A file size of zero is not allowed")
        if phy_size % page_size != 0:
            raise ValueError(
                f"File size {phy_size} is not a multiple of the page size {page_size}"
            )
        self._stream = stream
        self._page_size = page_size
        self._payload_size = page_size - _CHECKSUM_SIZE
        self._phy_size = phy_size
        self._pages = phy_size // page_size
        self._log_size = self._pages * self._payload_size
        self._offset = 0
        self._page_num: int | None = None
        self._page = b""

    def seek_physical(self, offset: int) -> int:
        """Move to a physical file offset and return the matching logical offset."""
        if offset >= self._phy_size:
            raise ValueError(f"Offset {offset} is behind end of file")
        pages_before = offset // self._page_size
        self._offset = offset - pages_before * _CHECKSUM_SIZE
        return self._offset

    def _read_page(self, page: int) -> None:
        if page >= self._pages:
            raise ValueError(
                f"Page {page} does not exist, only page numbers "
                f"0..{self._pages - 1} are valid"
            )
        self._stream.seek(page * self._page_size)
        buffer = self._stream.read(self._page_size)
        if len(buffer) != self._page_size:
            self._page_num = None
            raise EOFError(f"Unexpected end of data while reading page {page}")
        payload = buffer[: self._payload_size]
        expected = buffer[self._payload_size :]
        actual = crc32c(payload).to_bytes(4, "big")
        if expected != actual:
            self._page_num = None
            raise ValueError(
                f"Detected invalid checksum (expected: {list(expected)}, "
                f"actual: {list(actual)}) for page {page}"
            )
        self._page = payload
        self._page_num = page

    def align(self) -> None:
        """Skip forward to the next 4-byte-aligned logical offset, if needed."""
        misalignment = self._offset % _ALIGNMENT_SIZE
        if misalignment:
            skip = _ALIGNMENT_SIZE - misalignment
            if self._offset + skip > self._log_size:
                raise ValueError("Tried to seek behind end of the file")
            self._offset += skip

    def _read_chunk(self, size: int) -> bytes:
        page = self._offset // self._payload_size
        if page >= self._pages:
            return b""
        if self._page_num != page:
            self._read_page(page)
        start = self._offset % self._payload_size
        end = min(self._payload_size, start + size)
        chunk = self._page[start:end]
        self._offset += len(chunk)
        return chunk

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` logical bytes; a negative size reads to the end."""
        if size < 0:
            size = max(self._log_size - self._offset, 0)
        parts = []
        remaining = size
        while remaining > 0:
            chunk = self._read_chunk(remaining)
            if not chunk:
                break
            parts.append(chunk)
            remaining -= len(chunk)
        return b"".join(parts)

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` logical bytes or raise EOFError."""
        data = self.read(size)
        if len(data) != size:
            raise EOFError(f"Expected {size} bytes but only {len(data)} were available")
        return data