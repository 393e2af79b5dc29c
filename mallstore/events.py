"""Domain events emitted when store commands are applied, and placement failure reasons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from mallstore.chunks import ChunkCoord


class PlacementInvalidReason(Enum):
    INTERSECTS_BLOCKING_OBJECT = "intersects_blocking_object"
    OUTSIDE_OWNED_STORE_AREA = "outside_owned_store_area"
    OUTSIDE_WORLD_BOUNDS = "outside_world_bounds"
    WALL_SURFACE_MISSING = "wall_surface_missing"
    WALL_ATTACHMENT_INVALID = "wall_attachment_invalid"
    WALL_MOUNTED_OVERLAP = "wall_mounted_overlap"
    DOOR_ACCESS_BLOCKED = "door_access_blocked"


@dataclass(frozen=True)
class ObjectBuilt:
    id: int


@dataclass(frozen=True)
class ObjectMoved:
    id: int


@dataclass(frozen=True)
class ObjectRotated:
    id: int
    from_rotation: int
    to_rotation: int


@dataclass(frozen=True)
class ObjectDeleted:
    id: int


@dataclass(frozen=True)
class ChunkPurchased:
    coord: ChunkCoord


@dataclass(frozen=True)
class StoreAreaChanged:
    added_chunks: tuple[ChunkCoord, ...] = ()
    removed_chunks: tuple[ChunkCoord, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "added_chunks", tuple(self.added_chunks))
        object.__setattr__(self, "removed_chunks", tuple(self.removed_chunks))


DomainEvent = Union[
    ObjectBuilt,
    ObjectMoved,
    ObjectRotated,
    ObjectDeleted,
    ChunkPurchased,
    StoreAreaChanged,
]