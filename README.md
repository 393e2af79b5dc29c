# mallstore

The store-layout model of a mall-building simulation: the area a store owns,
how it may grow chunk by chunk, the boundary walls along its locked edges, and
the openings cut into those walls. It is plain Python with no dependencies.

## Modules

- `mallstore.geometry` — `Vec2` (an immutable 2D vector with `+`, `-`, `*`,
  `length`, `distance`, `lerp`, `normalize`) and `Rect` (an axis-aligned
  rectangle with `from_corners`, `contains`, `contains_rect`).
- `mallstore.chunks` — `ChunkCoord`, `ChunkKind`, `ChunkData`,
  `ExpansionPolicy`, `ChunkBounds`, and the helpers `side_neighbors`,
  `owned_bounds` and `would_create_hole` (a flood fill that reports whether
  adding a chunk would enclose empty space).
- `mallstore.area` — `WorldBounds` (the playable rectangle, by default
  −1200..1200 × −1000..1000) and `StoreArea`. A new `StoreArea` owns a 5 × 4
  block of chunks just below and to the left of its anchor; each chunk is
  4 × 4 cells of 32 world units. It maps world positions to chunks
  (`world_to_chunk_coord`), tests points (`contains_point`, half-open on the
  max edges) and checks polygons by sampling their edges
  (`contains_polygon_sampled`, returning a `CoverageResult`).
- `mallstore.expansion` — `validate_chunk_purchase` returns a
  `ChunkPurchaseValidation`. It checks, in order: already owned, outside the
  world, a direction the `ExpansionPolicy` forbids, no owned side neighbour,
  would create a hole. By default the store may grow left and down, but not
  right or up. `is_side_adjacent_to_owned` is exposed as well.
- `mallstore.boundary` — `collect_boundary_segments` returns one
  `BoundarySegment` per chunk edge along the locked top and right sides,
  sorted by (y, x, side). Also `BoundarySide`, `WallSegmentKey`,
  `WallSurface`, `boundary_wall_interior_direction`,
  `is_locked_boundary_side` and `wall_surface_world_pos`.
- `mallstore.opening` — `derive_opening_rect` resolves a `RectOpeningShape`
  at an attachment point to a `WallOpeningRect` (a `PolygonOpeningShape`
  raises `UnsupportedShapeError`); `validate_opening` raises
  `WallOpeningValidationError` with an `OpeningValidationReason` when an
  opening does not fit; `split_wall_around_openings` returns the solid
  `WallPieceRect`s left around the openings.
- `mallstore.walls` — `PlacedOpening`, `left_neighbor_key` /
  `right_neighbor_key`, `openings_for_segment` (collects openings on a
  segment, including those overflowing from its neighbours),
  `expand_dirty_segments`, and `WallSurfaceCache`, which keeps wall surfaces in
  step with the expected segments and tracks which need rebuilding.
- `mallstore.overlay` — `available_expansion_chunks` lists the chunks that may
  be bought now; `outline_edges` gives the edges of a chunk outline for an
  `OverlayKind`, leaving out edges shared between owned chunks.
- `mallstore.events` — event records `ObjectBuilt`, `ObjectMoved`,
  `ObjectRotated`, `ObjectDeleted`, `ChunkPurchased`, `StoreAreaChanged`, and
  the `PlacementInvalidReason` enum.

## Example

```python
from mallstore.area import StoreArea, WorldBounds
from mallstore.chunks import ChunkCoord, ChunkKind
from mallstore.expansion import validate_chunk_purchase
from mallstore.geometry import Vec2

world = WorldBounds()
store = StoreArea(Vec2(0.0, 0.0))

result = validate_chunk_purchase(world, store, ChunkCoord(-6, -1), ChunkKind.DEFAULT)
print(result.valid)            # True: left of the store is allowed

result = validate_chunk_purchase(world, store, ChunkCoord(0, -1), ChunkKind.DEFAULT)
print(result.reason)           # PurchaseRejectReason.DIRECTION_NOT_ALLOWED
```

Cutting a door into a wall:

```python
from mallstore.opening import WallOpeningRect, split_wall_around_openings

door = WallOpeningRect(offset_min=60.0, offset_max=124.0, height_min=0.0, height_max=96.0)
for piece in split_wall_around_openings(200.0, 120.0, [door]):
    print(piece)
# a strip left of the door, a piece above it, and a strip right of it
```

## What it does not do

This package is a model only. It has no command queue that applies changes to
a store: buying a chunk means checking it with `validate_chunk_purchase` and
then adding it to `StoreArea.owned_chunks` yourself. The event classes in
`mallstore.events` are records that callers may use; nothing in the package
emits them. There is no placement of floor or wall objects, no rendering, no
camera, no saving or loading, and no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```