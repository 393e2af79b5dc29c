"""The owned store area: chunk geometry, point and polygon coverage."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from mallstore.chunks import (
    ChunkBounds,
    ChunkCoord,
    ChunkData,
    ChunkKind,
    ExpansionPolicy,
    owned_bounds,
)
from mallstore.geometry import Rect, Vec2


def _default_world_rect() -> Rect:
    return Rect.from_corners(Vec2(-1200.0, -1000.0), Vec2(1200.0, 1000.0))


@dataclass
class WorldBounds:
    """The playable world rectangle."""

    rect: Rect = field(default_factory=_default_world_rect)

    def contains_chunk(self, coord: ChunkCoord) -> bool:
        """True if a 128-unit chunk at ``coord`` (origin-anchored) lies inside the world."""
        size = 128.0
        lo = Vec2(coord.x * size, coord.y * size)
        chunk = Rect.from_corners(lo, lo + Vec2(size, size))
        return self.rect.contains(chunk.min) and self.rect.contains(chunk.max)


@dataclass(frozen=True)
class CoverageSamplingOptions:
    max_edge_step: float = 16.0
    epsilon: float = 0.001


class CoverageFailureReason(Enum):
    POINT_OUTSIDE_OWNED_AREA = "point_outside_owned_area"
    EMPTY_POLYGON = "empty_polygon"


@dataclass(frozen=True)
class CoverageResult:
    valid: bool
    failed_point: Optional[Vec2] = None
    reason: Optional[CoverageFailureReason] = None


class StoreArea:
    """The set of chunks the player owns, laid out on a grid from ``anchor``."""

    def __init__(self, anchor: Vec2) -> None:
        self.anchor = anchor
        self.cell_size = Vec2(32.0, 32.0)
        self.chunk_size_cells = (4, 4)
        self.owned_chunks: dict[ChunkCoord, ChunkData] = {
            ChunkCoord(x, y): ChunkData(kind=ChunkKind.DEFAULT)
            for x in range(-5, 0)
            for y in range(-4, 0)
        }
        self.expansion_policy = ExpansionPolicy()

    def __repr__(self) -> str:
        return (
            f"StoreArea(anchor={self.anchor!r}, "
            f"owned_chunks={len(self.owned_chunks)})"
        )

    def chunk_world_size(self) -> Vec2:
        cells_x, cells_y = self.chunk_size_cells
        return Vec2(self.cell_size.x * cells_x, self.cell_size.y * cells_y)

    def chunk_rect(self, coord: ChunkCoord) -> Rect:
        size = self.chunk_world_size()
        lo = self.anchor + Vec2(coord.x * size.x, coord.y * size.y)
        return Rect.from_corners(lo, lo + size)

    def world_to_chunk_coord(self, world_pos: Vec2) -> ChunkCoord:
        size = self.chunk_world_size()
        local = world_pos - self.anchor
        return ChunkCoord(math.floor(local.x / size.x), math.floor(local.y / size.y))

    def contains_point(self, world_pos: Vec2) -> bool:
        """True if the point lies in an owned chunk (half-open on the max edges)."""
        coord = self.world_to_chunk_coord(world_pos)
        if coord not in self.owned_chunks:
            return False
        rect = self.chunk_rect(coord)
        return (
            rect.min.x <= world_pos.x < rect.max.x
            and rect.min.y <= world_pos.y < rect.max.y
        )

    def contains_polygon_sampled(
        self,
        polygon: Sequence[Vec2],
        options: Optional[CoverageSamplingOptions] = None,
    ) -> CoverageResult:
        """Check that every sampled point along the polygon's edges is owned."""
        if options is None:
            options = CoverageSamplingOptions()
        if not polygon:
            return CoverageResult(False, None, CoverageFailureReason.EMPTY_POLYGON)

        closing = list(polygon[1:]) + [polygon[0]]
        for a, b in zip(polygon, closing):
            length = (b - a).length()
            steps = max(int(math.ceil(length / options.max_edge_step)), 1)
            for i in range(steps + 1):
                sample = a.lerp(b, i / steps)
                if not self._contains_point_with_epsilon(sample, options.epsilon):
                    return CoverageResult(
                        False, sample, CoverageFailureReason.POINT_OUTSIDE_OWNED_AREA
                    )

        return CoverageResult(True)

    def _contains_point_with_epsilon(self, world_pos: Vec2, epsilon: float) -> bool:
        if self.world_to_chunk_coord(world_pos) in self.owned_chunks:
            return True
        nudges = (
            Vec2(epsilon, 0.0),
            Vec2(-epsilon, 0.0),
            Vec2(0.0, epsilon),
            Vec2(0.0, -epsilon),
        )
        return any(
            self.world_to_chunk_coord(world_pos + nudge) in self.owned_chunks
            for nudge in nudges
        )

    def owned_chunk_bounds(self) -> Optional[ChunkBounds]:
        return owned_bounds(self.owned_chunks)