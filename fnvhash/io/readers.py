# fnvhash/io/readers.py
"""
Reader (chunked binary)

Intent
- Stream a file's raw bytes in fixed-size chunks so engines can hash files of any size
  incrementally (write(chunk) per chunk gives the same digest as one write of the whole file).

Primary functions
- iter_file_chunks(path, chunk_size=65536) -> Iterator[bytes]

Error handling / failure modes
- Nonexistent path -> FileNotFoundError.
- Path is a directory -> IsADirectoryError.
- chunk_size <= 0 -> ValueError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

DEFAULT_CHUNK_SIZE = 65536


def iter_file_chunks(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield the file's bytes in chunks of at most chunk_size (last chunk may be shorter).
    An empty file yields nothing.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Input file not found: {str(p)}")
    if p.is_dir():
        raise IsADirectoryError(f"Expected a file, got a directory: {str(p)}")

    with p.open("rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk


__all__ = ["DEFAULT_CHUNK_SIZE", "iter_file_chunks"]
