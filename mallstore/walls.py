"""Wall segment bookkeeping: neighbours, openings per segment and the surface cache."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, Optional

from mallstore.boundary import (
    BoundarySegment,
    BoundarySide,
    WallSegmentKey,
    WallSurface,
)
from mallstore.chunks import ChunkCoord
from mallstore.opening import WallPieceRect

Color = tuple[float, ...]


@dataclass(frozen=True)
class PlacedOpening:
    """An opening cut into a wall segment, in that segment's local coordinates.

    Offsets may run past either end of the segment; the overflow then cuts
    into the neighbouring segment on that side.
    """

    segment_key: WallSegmentKey
    offset_min: float
    offset_max: float
    height_min: float
    height_max: float
    glass_color: Optional[Color] = None


def right_neighbor_key(key: WallSegmentKey) -> WallSegmentKey:
    """The next segment along the same wall line, in the direction of increasing offset."""
    chunk = key.chunk
    if key.side is BoundarySide.TOP:
        return WallSegmentKey(ChunkCoord(chunk.x + 1, chunk.y), key.side)
    return WallSegmentKey(ChunkCoord(chunk.x, chunk.y + 1), key.side)


def left_neighbor_key(key: WallSegmentKey) -> WallSegmentKey:
    """The previous segment along the same wall line."""
    chunk = key.chunk
    if key.side is BoundarySide.TOP:
        return WallSegmentKey(ChunkCoord(chunk.x - 1, chunk.y), key.side)
    return WallSegmentKey(ChunkCoord(chunk.x, chunk.y - 1), key.side)


def openings_for_segment(
    key: WallSegmentKey,
    segment_length: float,
    left_segment_length: float,
    openings: Iterable[PlacedOpening],
) -> list[PlacedOpening]:
    """All openings that cut into segment ``key``, clipped to ``[0, segment_length]``.

    Three sources contribute, in this order: openings placed on the segment
    itself, openings on the left neighbour that overflow its far end, and
    openings on the right neighbour that start before offset zero. The
    results carry ``key`` as their segment and keep their glass colour.
    """
    openings = list(openings)
    left_key = left_neighbor_key(key)
    right_key = right_neighbor_key(key)
    result: list[PlacedOpening] = []

    for o in openings:
        if o.segment_key != key:
            continue
        cmin = max(o.offset_min, 0.0)
        cmax = min(o.offset_max, segment_length)
        if cmin < cmax:
            result.append(
                PlacedOpening(key, cmin, cmax, o.height_min, o.height_max, o.glass_color)
            )

    for o in openings:
        if o.segment_key != left_key or o.offset_max <= left_segment_length:
            continue
        overflow = min(o.offset_max - left_segment_length, segment_length)
        if overflow > 0.0:
            result.append(
                PlacedOpening(key, 0.0, overflow, o.height_min, o.height_max, o.glass_color)
            )

    for o in openings:
        if o.segment_key != right_key or o.offset_min >= 0.0:
            continue
        left_extent = min(-o.offset_min, segment_length)
        if left_extent > 0.0:
            result.append(
                PlacedOpening(
                    key,
                    segment_length - left_extent,
                    segment_length,
                    o.height_min,
                    o.height_max,
                    o.glass_color,
                )
            )

    return result


def expand_dirty_segments(
    dirty: Iterable[WallSegmentKey], known_keys: AbstractSet[WallSegmentKey]
) -> set[WallSegmentKey]:
    """The dirty keys plus their immediate neighbours that are known segments.

    Neighbours must be rebuilt too, because an opening moving between
    segments can leave or add a cut-out on either side.
    """
    initial = set(dirty)
    expanded = set(initial)
    for key in initial:
        for neighbor in (left_neighbor_key(key), right_neighbor_key(key)):
            if neighbor in known_keys:
                expanded.add(neighbor)
    return expanded


@dataclass
class WallSurfaceCache:
    """Wall surfaces currently in place, their solid pieces and segments awaiting rebuild."""

    surfaces: dict[WallSegmentKey, WallSurface] = field(default_factory=dict)
    pieces: dict[WallSegmentKey, list[WallPieceRect]] = field(default_factory=dict)
    dirty: set[WallSegmentKey] = field(default_factory=set)
    initialized: bool = False

    def sync(self, expected: Iterable[BoundarySegment]) -> set[WallSegmentKey]:
        """Match the cached surfaces to ``expected``.

        Surfaces and pieces of segments no longer expected are dropped; new
        segments get a surface and are marked dirty. Returns the added keys.
        """
        expected = list(expected)
        expected_keys = {segment.key for segment in expected}

        for stale in [key for key in self.surfaces if key not in expected_keys]:
            del self.surfaces[stale]
            self.pieces.pop(stale, None)

        added: set[WallSegmentKey] = set()
        for segment in expected:
            if segment.key in self.surfaces:
                continue
            self.surfaces[segment.key] = WallSurface.from_segment(segment)
            self.dirty.add(segment.key)
            added.add(segment.key)

        self.initialized = True
        return added

    def clear(self) -> None:
        """Forget every surface and piece, as on a world reset."""
        self.surfaces.clear()
        self.pieces.clear()
        self.initialized = False