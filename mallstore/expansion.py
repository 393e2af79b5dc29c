"""Rules for buying new store chunks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mallstore.area import StoreArea, WorldBounds
from mallstore.chunks import (
    ChunkCoord,
    ChunkKind,
    owned_bounds,
    side_neighbors,
    would_create_hole,
)


class PurchaseRejectReason(Enum):
    ALREADY_OWNED = "already_owned"
    NOT_SIDE_ADJACENT = "not_side_adjacent"
    OUTSIDE_WORLD_BOUNDS = "outside_world_bounds"
    WOULD_CREATE_HOLE = "would_create_hole"
    DIRECTION_NOT_ALLOWED = "direction_not_allowed"


@dataclass(frozen=True)
class ChunkPurchaseValidation:
    """Outcome of checking whether a chunk may be bought."""

    valid: bool
    reason: Optional[PurchaseRejectReason] = None

    @classmethod
    def ok(cls) -> ChunkPurchaseValidation:
        return cls(True, None)

    @classmethod
    def reject(cls, reason: PurchaseRejectReason) -> ChunkPurchaseValidation:
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.valid


def is_side_adjacent_to_owned(store: StoreArea, coord: ChunkCoord) -> bool:
    """True if any edge-sharing neighbour of ``coord`` is owned."""
    return any(neighbor in store.owned_chunks for neighbor in side_neighbors(coord))


def _direction_allowed(store: StoreArea, coord: ChunkCoord) -> bool:
    bounds = owned_bounds(store.owned_chunks)
    if bounds is None:
        return True
    policy = store.expansion_policy
    if not policy.allow_right and coord.x > bounds.max.x:
        return False
    if not policy.allow_up and coord.y > bounds.max.y:
        return False
    if not policy.allow_left and coord.x < bounds.min.x:
        return False
    if not policy.allow_down and coord.y < bounds.min.y:
        return False
    return True


def validate_chunk_purchase(
    world: WorldBounds,
    store: StoreArea,
    coord: ChunkCoord,
    kind: ChunkKind = ChunkKind.DEFAULT,
) -> ChunkPurchaseValidation:
    """Check ownership, world bounds, direction policy, adjacency and holes, in that order."""
    if coord in store.owned_chunks:
        return ChunkPurchaseValidation.reject(PurchaseRejectReason.ALREADY_OWNED)

    if not world.rect.contains_rect(store.chunk_rect(coord)):
        return ChunkPurchaseValidation.reject(PurchaseRejectReason.OUTSIDE_WORLD_BOUNDS)

    if not _direction_allowed(store, coord):
        return ChunkPurchaseValidation.reject(PurchaseRejectReason.DIRECTION_NOT_ALLOWED)

    if not is_side_adjacent_to_owned(store, coord):
        return ChunkPurchaseValidation.reject(PurchaseRejectReason.NOT_SIDE_ADJACENT)

    if would_create_hole(store.owned_chunks, coord):
        return ChunkPurchaseValidation.reject(PurchaseRejectReason.WOULD_CREATE_HOLE)

    return ChunkPurchaseValidation.ok()