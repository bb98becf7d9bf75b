from __future__ import annotations
import logging
import os
import time
import stat as statmod
from typing import Callable, Optional
from .blocksize import block_size_of
from .drives import ExclusionPredicate, never_excluded
from .models import Node, ScanResult
from .utils import ceil_to_block

logger = logging.getLogger(__name__)

ProgressCb = Callable[[str, int, int], None]  # (current_path, files, dirs)

PROGRESS_INTERVAL = 0.10

class _Counters:
    def __init__(self, progress: Optional[ProgressCb] = None):
        self.files = 0
        self.dirs = 0
        self.errors = 0
        self.excluded = 0
        self._progress = progress
        self._last_emit = 0.0

    def emit(self, cur: str):
        if not self._progress:
            return
        now = time.time()
        if now - self._last_emit >= PROGRESS_INTERVAL:
            self._last_emit = now
            self._progress(cur, self.files, self.dirs)

def _list_dir(dir_path: str):
    with os.scandir(dir_path) as it:
        entries = list(it)
    entries.sort(key=lambda e: e.name)
    return entries

def _build(node: Node, block_size: int, is_excluded: ExclusionPredicate,
           depth: int, counters: _Counters) -> Node:
    if is_excluded(node.path, depth):
        logger.debug("skipping pseudo filesystem %s", node.path)
        counters.excluded += 1
        return node

    try:
        entries = _list_dir(node.path)
    except OSError as e:
        logger.debug("cannot list %s: %s", node.path, e)
        counters.errors += 1
        return node

    for entry in entries:
        child = Node(name=entry.name, path=entry.path, is_dir=False)
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            logger.debug("cannot stat %s: %s", entry.path, e)
            counters.errors += 1
            node.children.append(child)
            continue

        if statmod.S_ISDIR(st.st_mode):
            counters.dirs += 1
            child.name += os.sep
            child.is_dir = True
            _build(child, block_size, is_excluded, depth + 1, counters)
        else:
            counters.files += 1
            child.size = ceil_to_block(int(st.st_size), block_size)
        node.size += child.size
        node.children.append(child)
        counters.emit(node.path)

    node.children.sort(key=lambda n: n.size, reverse=True)
    return node

def build_tree(path: str,
               block_size: int,
               is_excluded: ExclusionPredicate = never_excluded,
               depth: int = 0,
               name: Optional[str] = None,
               counters: Optional[_Counters] = None) -> Node:
    """Walk *path* and return its size-annotated tree.

    Files are charged whole blocks of *block_size*; directories carry the sum of
    their children. Children are sorted by size, largest first. Unreadable
    entries contribute 0 instead of aborting the walk. Symlinks are never
    followed.
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")
    root = Node(name=path if name is None else name, path=path, is_dir=True)
    return _build(root, block_size, is_excluded, depth, counters or _Counters())

def scan_path(root: str,
              block_size: Optional[int] = None,
              is_excluded: Optional[ExclusionPredicate] = None,
              progress: Optional[ProgressCb] = None) -> ScanResult:
    t0 = time.time()
    if block_size is None:
        block_size = block_size_of(root)
    if is_excluded is None:
        is_excluded = never_excluded
    logger.info("scanning %s (block size %d)", root, block_size)

    counters = _Counters(progress)
    tree = build_tree(root, block_size, is_excluded, counters=counters)

    elapsed = time.time() - t0
    logger.info("scanned %d files, %d dirs in %.2fs (%d errors, %d excluded)",
                counters.files, counters.dirs, elapsed, counters.errors, counters.excluded)
    return ScanResult(
        root=tree,
        block_size=block_size,
        files=counters.files,
        dirs=counters.dirs,
        errors=counters.errors,
        excluded=counters.excluded,
        elapsed_sec=elapsed,
    )
