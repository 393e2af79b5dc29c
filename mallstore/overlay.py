"""Which chunks the store overlay outlines, and which of their edges it draws."""

from __future__ import annotations

from enum import Enum

from mallstore.area import StoreArea, WorldBounds
from mallstore.chunks import ChunkCoord, ChunkKind, side_neighbors
from mallstore.expansion import validate_chunk_purchase
from mallstore.geometry import Vec2


class OverlayKind(Enum):
    OWNED = "owned"
    AVAILABLE = "available"
    HOVERED_AVAILABLE = "hovered_available"


def available_expansion_chunks(world: WorldBounds, store: StoreArea) -> list[ChunkCoord]:
    """Chunks next to the store that may be bought now, sorted by (y, x)."""
    candidates = {
        neighbor
        for coord in store.owned_chunks
        for neighbor in side_neighbors(coord)
    }
    valid = [
        coord
        for coord in candidates
        if validate_chunk_purchase(world, store, coord, ChunkKind.DEFAULT).valid
    ]
    valid.sort(key=lambda coord: (coord.y, coord.x))
    return valid


def outline_edges(
    store: StoreArea, coord: ChunkCoord, kind: OverlayKind
) -> list[tuple[Vec2, Vec2]]:
    """World-space edges of the chunk outline, counter-clockwise from its min corner.

    Owned chunks leave out every edge shared with another owned chunk, so the
    owned area is drawn as a single outline.
    """
    rect = store.chunk_rect(coord)
    corners = (
        rect.min,
        Vec2(rect.max.x, rect.min.y),
        rect.max,
        Vec2(rect.min.x, rect.max.y),
    )
    neighbors = (
        ChunkCoord(coord.x, coord.y - 1),
        ChunkCoord(coord.x + 1, coord.y),
        ChunkCoord(coord.x, coord.y + 1),
        ChunkCoord(coord.x - 1, coord.y),
    )
    closing = corners[1:] + corners[:1]

    edges: list[tuple[Vec2, Vec2]] = []
    for start, end, neighbor in zip(corners, closing, neighbors):
        if kind is OverlayKind.OWNED and neighbor in store.owned_chunks:
            continue
        edges.append((start, end))
    return edges