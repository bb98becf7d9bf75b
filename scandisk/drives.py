from __future__ import annotations
import logging
import os
import sys
from typing import Callable, Iterable, List, Optional

import psutil

logger = logging.getLogger(__name__)

# Synthetic process-information filesystems: contents are generated on read.
PSEUDO_FSTYPES = {"proc"}
FALLBACK_MOUNTPOINTS = ["/proc"]
# Only the root and its direct subdirectories are checked.
EXCLUDE_MAX_DEPTH = 2

ExclusionPredicate = Callable[[str, int], bool]

def pseudo_mountpoints() -> List[str]:
    mounts = []
    seen = set()
    try:
        partitions = psutil.disk_partitions(all=True)
    except (OSError, psutil.Error) as e:
        logger.debug("cannot list partitions: %s", e)
        return list(FALLBACK_MOUNTPOINTS)
    for p in partitions:
        if p.fstype not in PSEUDO_FSTYPES or not p.mountpoint:
            continue
        mp = os.path.abspath(p.mountpoint)
        if mp in seen:
            continue
        seen.add(mp)
        mounts.append(mp)
    return mounts or list(FALLBACK_MOUNTPOINTS)

def never_excluded(path: str, depth: int) -> bool:
    return False

def _is_under(path: str, mountpoint: str) -> bool:
    if path == mountpoint:
        return True
    return path.startswith(mountpoint.rstrip(os.sep) + os.sep)

def make_exclusion(platform: str = sys.platform,
                   mountpoints: Optional[Iterable[str]] = None) -> ExclusionPredicate:
    """Build the is_excluded(path, depth) predicate for the scanner.

    Only Linux mounts a proc filesystem worth skipping; elsewhere nothing is
    excluded and psutil is not consulted.
    """
    if not platform.startswith("linux"):
        return never_excluded
    mps = [os.path.abspath(m) for m in (mountpoints if mountpoints is not None else pseudo_mountpoints())]
    logger.debug("excluding pseudo filesystems at %s", mps)

    def is_excluded(path: str, depth: int) -> bool:
        if depth >= EXCLUDE_MAX_DEPTH:
            return False
        ap = os.path.abspath(path)
        return any(_is_under(ap, mp) for mp in mps)

    return is_excluded
