import io

import pytest

from e57pages.paged_reader import PagedReader
from e57pages.paged_writer import (
    CRC_SIZE,
    PAGE_PAYLOAD_SIZE,
    PAGE_SIZE,
    PagedWriter,
)


def write_with(actions):
    stream = io.BytesIO()
    with PagedWriter(stream) as writer:
        actions(writer)
    return stream.getvalue()


def test_empty():
    content = write_with(lambda w: None)
    assert len(content) == 0


def test_not_empty_stream_rejected():
    with pytest.raises(ValueError):
        PagedWriter(io.BytesIO(b"x"))


def test_partial_page():
    content = write_with(lambda w: w.write(bytes([0, 1, 2])))
    assert len(content) == PAGE_SIZE
    assert content[:3] == bytes([0, 1, 2])
    assert content[3:PAGE_PAYLOAD_SIZE] == bytes(PAGE_PAYLOAD_SIZE - 3)
    assert list(content[PAGE_PAYLOAD_SIZE:]) == [156, 69, 208, 231]


def test_single_page():
    content = write_with(lambda w: w.write(bytes([1]) * PAGE_PAYLOAD_SIZE))
    assert len(content) == PAGE_SIZE
    assert content[:PAGE_PAYLOAD_SIZE] == bytes([1]) * PAGE_PAYLOAD_SIZE
    assert list(content[PAGE_PAYLOAD_SIZE:]) == [25, 85, 144, 35]


def test_multi_page():
    data = bytearray([1]) * (PAGE_PAYLOAD_SIZE + 1)
    data[PAGE_PAYLOAD_SIZE] = 2
    content = write_with(lambda w: w.write(bytes(data)))
    assert len(content) == 2 * PAGE_SIZE
    assert content[:PAGE_PAYLOAD_SIZE] == bytes([1]) * PAGE_PAYLOAD_SIZE
    assert list(content[PAGE_PAYLOAD_SIZE : PAGE_PAYLOAD_SIZE + CRC_SIZE]) == [
        25,
        85,
        144,
        35,
    ]
    second = content[PAGE_SIZE:]
    assert second[0] == 2
    assert second[1:PAGE_PAYLOAD_SIZE] == bytes(PAGE_PAYLOAD_SIZE - 1)
    assert list(second[PAGE_PAYLOAD_SIZE:]) == [40, 41, 250, 169]


def test_flush_in_page():
    def actions(w):
        w.write(bytes([0, 1, 2]))
        w.flush()
        w.write(bytes([3, 4, 5]))

    content = write_with(actions)
    assert len(content) == PAGE_SIZE
    assert content[:6] == bytes(range(6))
    assert content[6:PAGE_PAYLOAD_SIZE] == bytes(PAGE_PAYLOAD_SIZE - 6)
    assert list(content[PAGE_PAYLOAD_SIZE:]) == [50, 14, 64, 153]


def test_seek_existing_page():
    def actions(w):
        w.write(bytes([1]) * (PAGE_PAYLOAD_SIZE * 2))
        w.physical_seek(2)
        w.write(bytes([2, 2]))

    content = write_with(actions)
    assert list(content[:6]) == [1, 1, 2, 2, 1, 1]


def test_seek_after_end():
    stream = io.BytesIO()
    writer = PagedWriter(stream)
    writer.physical_seek(0)
    with pytest.raises(ValueError):
        writer.physical_seek(1)
    writer.write(bytes([1]) * 128)
    writer.physical_seek(129)
    assert writer.physical_position() == 129
    with pytest.raises(ValueError):
        writer.physical_seek(PAGE_SIZE + 1)


def test_seek_into_checksum_fails():
    writer = PagedWriter(io.BytesIO())
    writer.write(bytes([1]))
    writer.flush()
    with pytest.raises(ValueError):
        writer.physical_seek(PAGE_PAYLOAD_SIZE)
    with pytest.raises(ValueError):
        writer.physical_seek(PAGE_PAYLOAD_SIZE + 3)


def test_phys_position_size():
    writer = PagedWriter(io.BytesIO())
    writer.write(bytes([1]) * 1028)
    assert writer.physical_position() == 1028 + CRC_SIZE
    assert writer.physical_size() == PAGE_SIZE * 2


def test_align():
    stream = io.BytesIO()
    writer = PagedWriter(stream)
    writer.align()
    assert writer.physical_position() == 0
    writer.write(bytes([1]))
    writer.align()
    assert writer.physical_position() == 4
    writer.align()
    assert writer.physical_position() == 4
    writer.write(bytes([2, 2, 2]))
    writer.align()
    assert writer.physical_position() == 8
    writer.close()
    content = stream.getvalue()
    assert len(content) == 1024
    assert list(content[:8]) == [1, 0, 0, 0, 2, 2, 2, 0]
    assert content[8:PAGE_PAYLOAD_SIZE] == bytes(PAGE_PAYLOAD_SIZE - 8)


def test_seek_back_in_current_page():
    def actions(w):
        w.write(bytes([4, 1, 2, 3]))
        w.physical_seek(0)
        w.write(bytes([0]))
        w.flush()

    content = write_with(actions)
    assert list(content[:4]) == [0, 1, 2, 3]


def test_write_over_page_boundary():
    def actions(w):
        w.write(bytes([1]) * PAGE_PAYLOAD_SIZE)
        w.write(bytes([2]) * PAGE_PAYLOAD_SIZE)
        w.physical_seek(PAGE_PAYLOAD_SIZE - 1)
        w.write(bytes([3, 3]))
        w.flush()

    content = write_with(actions)
    assert content[: PAGE_PAYLOAD_SIZE - 1] == bytes([1]) * (PAGE_PAYLOAD_SIZE - 1)
    assert content[PAGE_PAYLOAD_SIZE - 1] == 3
    assert content[PAGE_SIZE] == 3
    assert content[PAGE_SIZE + 1 : PAGE_SIZE + PAGE_PAYLOAD_SIZE] == bytes([2]) * (
        PAGE_PAYLOAD_SIZE - 1
    )


def test_written_file_readable_with_paged_reader(tmp_path):
    path = tmp_path / "roundtrip.bin"
    payload = bytes(i % 251 for i in range(3000))
    with open(path, "w+b") as handle:
        with PagedWriter(handle) as writer:
            assert writer.write(payload) == len(payload)
    with open(path, "rb") as handle:
        reader = PagedReader(handle, PAGE_SIZE)
        data = reader.read()
    assert len(data) == 3 * PAGE_PAYLOAD_SIZE
    assert data[: len(payload)] == payload
    assert data[len(payload) :] == bytes(len(data) - len(payload))