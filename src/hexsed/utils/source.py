"""
Loading of the file an edit is applied to.
"""

import os
import mmap
import logging
from contextlib import contextmanager
from typing import Final, Iterator, Union

from ..errors import SourceUnavailable

logger = logging.getLogger(__name__)

MMAP_THRESHOLD: Final[int] = 10 * 1024 * 1024

SourceData = Union[bytes, mmap.mmap]


def source_exists(path: str) -> bool:
    """Report whether a path refers to a readable regular file."""

    return os.path.isfile(path) and os.access(path, os.R_OK)


@contextmanager
def load_source(path: str, mmap_threshold: int = MMAP_THRESHOLD) -> Iterator[SourceData]:
    """
    Load the complete contents of a file as a read-only byte range.

    Files larger than ``mmap_threshold`` are memory mapped instead of read,
    the map is closed when the context exits.

    Args:
        path (str): Path of the file to load
        mmap_threshold (int): Size in bytes above which the file is mapped

    Yields:
        bytes or mmap.mmap: The file contents

    Raises:
        SourceUnavailable: If the file is missing or cannot be read
    """

    if not source_exists(path):
        raise SourceUnavailable(path)

    try:
        file_size = os.path.getsize(path)
        f = open(path, 'rb')
    except OSError as e:
        raise SourceUnavailable(path, f"Cannot read file ({e.strerror})") from e

    with f:
        if file_size <= mmap_threshold or file_size == 0:
            logger.debug("Reading %s (%d bytes)", path, file_size)
            yield f.read()
            return

        logger.debug("Mapping %s (%d bytes)", path, file_size)
        file_map = mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)
        try:
            yield file_map
        finally:
            file_map.close()
