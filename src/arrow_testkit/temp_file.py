import logging
import os
from pathlib import Path
from typing import BinaryIO

from .constants import TEMP_DIR_PARTS

__all__ = ["get_temp_file"]


def get_temp_file(file_name: str, content: bytes) -> BinaryIO:
    """Write ``content`` to ``file_name`` and return it opened for update.

    The file lives in ``target/debug/testdata`` under the current working
    directory and is replaced if it already exists.

    Args:
        file_name: Name of the file inside the test data directory.
        content: Bytes to write.

    Returns:
        BinaryIO: Handle opened ``"r+b"`` at offset 0. The caller closes it.
    """

    directory = Path.cwd().joinpath(*TEMP_DIR_PARTS)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name

    with open(path, "wb") as fh:
        fh.write(content)
        fh.flush()
        os.fsync(fh.fileno())
    logging.getLogger(__name__).debug("wrote %d bytes to %s", len(content), path)

    return open(path, "r+b")
