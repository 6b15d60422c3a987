"""Writing of paged files where every page ends with a CRC-32C checksum."""

from __future__ import annotations

from types import TracebackType
from typing import BinaryIO

from e57pages.paged_reader import crc32c

PAGE_SIZE = 1024
CRC_SIZE = 4
PAGE_PAYLOAD_SIZE = PAGE_SIZE - CRC_SIZE


class PagedWriter:
    """Writes a continuous logical stream as checksummed physical pages.

    The underlying stream must be readable, writable and seekable, and empty
    when the writer is created. Each page of ``PAGE_SIZE`` bytes ends with a
    big endian CRC-32C of its payload.
    """

    def __init__(self, stream: BinaryIO) -> None:
        if stream.seek(0, 2) != 0:
            raise ValueError("Supplied writer is not empty")
        self._stream = stream
        self._offset = 0
        self._page = bytearray(PAGE_SIZE)
        self._closed = False

    def physical_position(self) -> int:
        """Return the current physical offset in the file."""
        return self._stream.tell() + self._offset

    def physical_seek(self, pos: int) -> None:
        """Move to a physical offset, keeping the existing data of its page."""
        self.flush()
        end = self._stream.seek(0, 2)
        if pos > end:
            raise ValueError("Cannot seek after end of file")
        page, offset = divmod(pos, PAGE_SIZE)
        if offset >= PAGE_PAYLOAD_SIZE:
            raise ValueError("Cannot seek into checksum")
        page_start = page * PAGE_SIZE
        self._stream.seek(page_start)
        self._read_current_page()
        self._stream.seek(page_start)
        self._offset = offset

    def _read_current_page(self) -> None:
        """Load existing data of the page at the stream position, zero padded."""
        data = b""
        while len(data) < PAGE_SIZE:
            chunk = self._stream.read(PAGE_SIZE - len(data))
            if not chunk:
                break
            data += chunk
        self._page[: len(data)] = data
        self._page[len(data) :] = bytes(PAGE_SIZE - len(data))

    def physical_size(self) -> int:
        """Return the current physical size of the file after flushing."""
        self.flush()
        pos = self._stream.tell()
        size = self._stream.seek(0, 2)
        self._stream.seek(pos)
        return size

    def align(self) -> None:
        """Write zeros up to the next 4-byte-aligned offset, if needed."""
        misalignment = self._offset % 4
        if misalignment:
            self.write(bytes(4 - misalignment))

    def _seal_page(self) -> None:
        checksum = crc32c(bytes(self._page[:PAGE_PAYLOAD_SIZE]))
        self._page[PAGE_PAYLOAD_SIZE:] = checksum.to_bytes(CRC_SIZE, "big")

    def write(self, data: bytes) -> int:
        """Write all of ``data`` and return the number of bytes written."""
        view = memoryview(data).cast("B")
        while view:
            writable = min(len(view), PAGE_PAYLOAD_SIZE - self._offset)
            self._page[self._offset : self._offset + writable] = view[:writable]
            self._offset += writable
            view = view[writable:]
            if self._offset == PAGE_PAYLOAD_SIZE:
                self._seal_page()
                self._stream.write(self._page)
                next_page = self._stream.tell()
                self._offset = 0
                self._read_current_page()
                self._stream.seek(next_page)
        return len(data)

    def flush(self) -> None:
        """Persist the current partial page and flush the underlying stream."""
        if self._offset > 0:
            pos = self._stream.tell()
            self._seal_page()
            self._stream.write(self._page)
            self._stream.seek(pos)
        self._stream.flush()

    def close(self) -> None:
        """Flush any pending page data; the underlying stream stays open."""
        if not self._closed:
            self.flush()
            self._closed = True

    def __enter__(self) -> PagedWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()