from __future__ import annotations
import logging
import os
import sys

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 4096

def _posix_block_size(path: str) -> int:
    return int(os.statvfs(path).f_bsize)

def _windows_block_size(path: str) -> int:
    import ctypes
    sectors_per_cluster = ctypes.c_ulong(0)
    bytes_per_sector = ctypes.c_ulong(0)
    free_clusters = ctypes.c_ulong(0)
    total_clusters = ctypes.c_ulong(0)
    ok = ctypes.windll.kernel32.GetDiskFreeSpaceW(
        ctypes.c_wchar_p(os.path.abspath(path)),
        ctypes.byref(sectors_per_cluster),
        ctypes.byref(bytes_per_sector),
        ctypes.byref(free_clusters),
        ctypes.byref(total_clusters),
    )
    if not ok:
        raise OSError(f"GetDiskFreeSpaceW failed for {path}")
    return int(bytes_per_sector.value)

def block_size_of(path: str) -> int:
    """Allocation block size of the filesystem holding *path*.

    Falls back to DEFAULT_BLOCK_SIZE when the platform query fails.
    """
    query = _windows_block_size if sys.platform.startswith("win") else _posix_block_size
    try:
        size = query(path)
    except (OSError, AttributeError, ValueError) as e:
        logger.debug("block size query failed for %s: %s", path, e)
        return DEFAULT_BLOCK_SIZE
    if size <= 0:
        logger.debug("block size query for %s returned %d", path, size)
        return DEFAULT_BLOCK_SIZE
    return size
