"""Store chunk coordinates, expansion policy and hole detection."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


@dataclass(frozen=True, order=True)
class ChunkCoord:
    """Integer coordinate of a store chunk on the chunk grid."""

    x: int
    y: int


class ChunkKind(Enum):
    DEFAULT = "default"


@dataclass
class ChunkData:
    kind: ChunkKind = ChunkKind.DEFAULT


@dataclass
class ExpansionPolicy:
    """Which directions the store may grow in, and the shape rules it obeys."""

    allow_left: bool = True
    allow_right: bool = False
    allow_up: bool = False
    allow_down: bool = True
    require_side_adjacency: bool = True
    forbid_holes: bool = True


@dataclass(frozen=True)
class ChunkBounds:
    """Inclusive bounding box of a set of chunk coordinates."""

    min: ChunkCoord
    max: ChunkCoord


def side_neighbors(coord: ChunkCoord) -> tuple[ChunkCoord, ChunkCoord, ChunkCoord, ChunkCoord]:
    """The four edge-sharing neighbours: left, right, down, up."""
    return (
        ChunkCoord(coord.x - 1, coord.y),
        ChunkCoord(coord.x + 1, coord.y),
        ChunkCoord(coord.x, coord.y - 1),
        ChunkCoord(coord.x, coord.y + 1),
    )


def owned_bounds(chunks: Iterable[ChunkCoord]) -> Optional[ChunkBounds]:
    """Bounding box of the given coordinates (or mapping keys); None if empty."""
    coords = list(chunks)
    if not coords:
        return None
    return ChunkBounds(
        ChunkCoord(min(c.x for c in coords), min(c.y for c in coords)),
        ChunkCoord(max(c.x for c in coords), max(c.y for c in coords)),
    )


def would_create_hole(owned_chunks: Iterable[ChunkCoord], candidate: ChunkCoord) -> bool:
    """True if adding ``candidate`` would enclose empty chunks.

    Flood-fills the empty space from outside the bounding box (padded by one);
    any empty cell inside the box that the fill cannot reach is a hole.
    """
    occupied = set(owned_chunks)
    occupied.add(candidate)

    bounds = owned_bounds(occupied)
    if bounds is None:
        return False

    min_x, max_x = bounds.min.x - 1, bounds.max.x + 1
    min_y, max_y = bounds.min.y - 1, bounds.max.y + 1
    start = ChunkCoord(min_x, min_y)
    seen = {start}
    queue = deque([start])

    while queue:
        coord = queue.popleft()
        for nxt in side_neighbors(coord):
            if not (min_x <= nxt.x <= max_x and min_y <= nxt.y <= max_y):
                continue
            if nxt in occupied or nxt in seen:
                continue
            seen.add(nxt)
            queue.append(nxt)

    return any(
        ChunkCoord(x, y) not in occupied and ChunkCoord(x, y) not in seen
        for x in range(min_x + 1, max_x)
        for y in range(min_y + 1, max_y)
    )