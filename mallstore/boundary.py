"""Boundary walls along the locked edges of the store."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mallstore.area import StoreArea, WorldBounds
from mallstore.chunks import ChunkCoord, ExpansionPolicy
from mallstore.geometry import Vec2

_F32_EPSILON = 1.1920929e-07
_WALL_THICKNESS = 8.0
_WALL_HEIGHT_FACTOR = 1.5


class BoundarySide(Enum):
    """Which edge of the store a wall segment runs along."""

    TOP = 0
    RIGHT = 1


@dataclass(frozen=True)
class WallSegmentKey:
    """Identifies one wall segment: the chunk it borders and the side it lies on."""

    chunk: ChunkCoord
    side: BoundarySide

    def sort_key(self) -> tuple[int, int, int]:
        return (self.chunk.y, self.chunk.x, self.side.value)


@dataclass(frozen=True)
class BoundarySegment:
    """Geometry of one expected wall segment."""

    key: WallSegmentKey
    start: Vec2
    end: Vec2
    normal: Vec2
    length: float
    height: float
    thickness: float


@dataclass(frozen=True)
class WallSurface:
    """A placed wall surface that objects can be mounted on."""

    key: WallSegmentKey
    start: Vec2
    end: Vec2
    length: float
    height: float
    thickness: float
    normal: Vec2

    @classmethod
    def from_segment(cls, segment: BoundarySegment) -> WallSurface:
        return cls(
            key=segment.key,
            start=segment.start,
            end=segment.end,
            length=segment.length,
            height=segment.height,
            thickness=segment.thickness,
            normal=segment.normal,
        )


def wall_surface_world_pos(surface: WallSurface, offset_along_segment: float) -> Vec2:
    """World position at ``offset_along_segment`` along the surface, clamped to its ends."""
    t = offset_along_segment / max(surface.length, _F32_EPSILON)
    t = min(max(t, 0.0), 1.0)
    return surface.start.lerp(surface.end, t)


def boundary_wall_interior_direction(side: BoundarySide) -> Vec2:
    """Unit vector pointing from a wall on ``side`` into the store."""
    if side is BoundarySide.TOP:
        return Vec2(0.0, -1.0)
    return Vec2(-1.0, 0.0)


def is_locked_boundary_side(policy: ExpansionPolicy, side: BoundarySide) -> bool:
    """True if the store may not grow past ``side``, so it carries a wall."""
    if side is BoundarySide.TOP:
        return not policy.allow_up
    return not policy.allow_right


def _line_segments(
    store: StoreArea, world: WorldBounds, side: BoundarySide
) -> list[BoundarySegment]:
    if not is_locked_boundary_side(store.expansion_policy, side):
        return []
    bounds = store.owned_chunk_bounds()
    if bounds is None:
        return []

    chunk_size = store.chunk_world_size()
    height = chunk_size.y * _WALL_HEIGHT_FACTOR

    if side is BoundarySide.TOP:
        coords = [
            ChunkCoord(x, bounds.max.y) for x in range(bounds.max.x, bounds.min.x - 1, -1)
        ]
        normal = Vec2(0.0, 1.0)
    else:
        coords = [
            ChunkCoord(bounds.max.x, y) for y in range(bounds.max.y, bounds.min.y - 1, -1)
        ]
        normal = Vec2(1.0, 0.0)

    segments: list[BoundarySegment] = []
    for coord in coords:
        if coord not in store.owned_chunks:
            continue
        rect = store.chunk_rect(coord)
        if side is BoundarySide.TOP:
            start = Vec2(rect.min.x, rect.max.y)
        else:
            start = Vec2(rect.max.x, rect.min.y)
        end = Vec2(rect.max.x, rect.max.y)
        if not (world.rect.contains(start) and world.rect.contains(end)):
            continue
        segments.append(
            BoundarySegment(
                key=WallSegmentKey(coord, side),
                start=start,
                end=end,
                normal=normal,
                length=start.distance(end),
                height=height,
                thickness=_WALL_THICKNESS,
            )
        )
    return segments


def collect_boundary_segments(
    store: StoreArea, world: Optional[WorldBounds] = None
) -> list[BoundarySegment]:
    """All wall segments along the locked top and right edges, sorted by (y, x, side)."""
    if world is None:
        world = WorldBounds()
    segments = _line_segments(store, world, BoundarySide.TOP)
    segments.extend(_line_segments(store, world, BoundarySide.RIGHT))
    segments.sort(key=lambda segment: segment.key.sort_key())
    return segments