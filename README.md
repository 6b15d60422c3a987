# e57pages

This package has building blocks for reading and writing E57 point cloud files in pure Python.

An E57 file is split into pages of a fixed size. The last four bytes of each page are a CRC-32C checksum, stored big endian. This package handles those pages and processes points after they have been read.

## Modules

- `e57pages.paged_reader`
  - `crc32c(data)` returns the CRC-32C (Castagnoli) checksum of a bytes object.
  - `PagedReader(stream, page_size)` reads the logical content of a paged file from a seekable binary stream. The checksums are left out of what it returns.
    - The constructor raises `ValueError` in these cases:
      - the page size is more than 1 MiB;
      - the page size is 4 bytes or less;
      - the stream is empty;
      - the stream size is not a multiple of the page size.
    - `read(size=-1)` returns up to `size` logical bytes. A negative size reads to the end.
    - `read_exact(size)` raises `EOFError` when fewer bytes are available than asked for.
    - Each page's checksum is checked when the page is loaded. A mismatch raises `ValueError`.
    - `seek_physical(offset)` moves to a physical file offset and returns the matching logical offset.
    - `align()` skips forward to the next 4-byte-aligned logical offset.
- `e57pages.paged_writer`
  - `PagedWriter(stream)` writes pages of `PAGE_SIZE` (1024) bytes, each with its checksum. The stream must be readable, writable, seekable and empty; a stream that is not empty raises `ValueError`.
    - `write(data)` writes the bytes.
    - `align()` pads with zeros up to the next 4-byte boundary.
    - `flush()` writes out the current partial page.
    - `physical_position()` returns the current physical offset.
    - `physical_size()` returns the current size of the file.
    - `physical_seek(pos)` moves back into data that is already written and keeps the existing content of that page. Seeking past the end of the file raises `ValueError`, and so does seeking into a checksum.
    - `close()` flushes pending data and leaves the stream open.
    - The writer also works as a context manager.
- `e57pages.point` holds the point model:
  - Cartesian coordinates: `CartesianValid`, `CartesianDirection`, `CartesianInvalid`.
  - Spherical coordinates: `SphericalValid`, `SphericalDirection`, `SphericalInvalid`.
  - `Color`.
  - `Point`. Its `color` and `intensity` are `None` when they are missing. Its `row` and `column` are `-1` when there are no grid indices.
- `e57pages.processing`
  - `convert_to_cartesian(point)` fills in Cartesian data from spherical data, and `convert_to_spherical(point)` does the reverse. Each one only fills in a coordinate that is missing.
  - `convert_intensity(point)` uses the intensity as a grey colour when the point has no colour.
  - `rotation_matrix(w, x, y, z)` builds a column-major 3x3 matrix from a quaternion.
  - `transform_point(point, rotation, translation)` applies that matrix and a translation to a valid Cartesian coordinate.
  - All of these change the point in place and also return it.
- `e57pages.normalize`
  - `ValueRange(minimum, maximum)` clamps a value into the range and scales it to 0..1 with `normalize`. The result is rounded to single precision. A range with `maximum < minimum` raises `ValueError`.
  - `normalize_value(enabled, value, value_range)`:
    - applies the range when `enabled` is true;
    - returns `0.0` when there is no range;
    - when `enabled` is false, returns the value rounded to single precision.

## Writing and reading pages

```python
import io
from e57pages.paged_writer import PagedWriter
from e57pages.paged_reader import PagedReader

buffer = io.BytesIO()
with PagedWriter(buffer) as writer:
    writer.write(b"hello paged world")
    writer.align()

reader = PagedReader(io.BytesIO(buffer.getvalue()), 1024)
print(reader.read_exact(17))   # b'hello paged world'
```

## Converting points

```python
import math
from e57pages.point import CartesianInvalid, Point, SphericalValid
from e57pages.processing import convert_to_cartesian

p = Point(
    cartesian=CartesianInvalid(),
    spherical=SphericalValid(range=10.0, azimuth=0.0, elevation=math.pi / 2),
)
convert_to_cartesian(p)
print(p.cartesian)   # x close to 0, y 0.0, z 10.0
```

## What this package does not do

This package does not parse or write these parts of an E57 file:

- the file header;
- the XML section;
- compressed vector sections;
- point cloud records.

It also has no image or blob handling and no command-line tools. What it offers is the checksummed page layer and the point post-processing steps. A complete E57 reader or writer could be built on top of these.

## Running the tests

```
pip install -e .[test]
pytest
```