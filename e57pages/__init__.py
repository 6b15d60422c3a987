"""Checksummed page I/O and point post-processing for E57 point cloud files."""

__version__ = "0.1.0"
__all__ = ["point", "paged_reader", "paged_writer", "processing", "normalize"]