from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List

@dataclass
class Node:
    name: str
    path: str
    is_dir: bool
    size: int = 0
    children: List["Node"] = field(default_factory=list)

    def walk(self) -> Iterator["Node"]:
        """Yield this node and every descendant, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

@dataclass
class ScanResult:
    root: Node
    block_size: int
    files: int
    dirs: int
    errors: int           # entries whose stat or listing failed
    excluded: int         # pseudo-filesystem subtrees skipped
    elapsed_sec: float
