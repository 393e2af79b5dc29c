from mallstore.area import (
    CoverageFailureReason,
    CoverageSamplingOptions,
    StoreArea,
    WorldBounds,
)
from mallstore.chunks import ChunkCoord
from mallstore.geometry import Vec2

ZERO = Vec2(0.0, 0.0)


def splat(v):
    return Vec2(v, v)


def test_initial_store_has_20_chunks():
    store = StoreArea(ZERO)
    assert len(store.owned_chunks) == 20
    assert store.owned_chunk_bounds().min == ChunkCoord(-5, -4)
    assert store.owned_chunk_bounds().max == ChunkCoord(-1, -1)


def test_world_to_chunk_coord_boundaries():
    store = StoreArea(ZERO)
    size = store.chunk_world_size()

    assert store.world_to_chunk_coord(ZERO) == ChunkCoord(0, 0)
    assert store.world_to_chunk_coord(Vec2(-0.001, -0.001)) == ChunkCoord(-1, -1)
    assert store.world_to_chunk_coord(size) == ChunkCoord(1, 1)
    assert store.world_to_chunk_coord(size - splat(0.001)) == ChunkCoord(0, 0)
    assert store.world_to_chunk_coord(-size) == ChunkCoord(-1, -1)
    assert store.world_to_chunk_coord(-size - splat(0.001)) == ChunkCoord(-2, -2)


def test_contains_point_respects_half_open_interval():
    store = StoreArea(ZERO)
    size = store.chunk_world_size()

    assert store.contains_point(Vec2(-0.001, -0.001))
    assert not store.contains_point(ZERO)
    assert store.contains_point(-size)
    assert not store.contains_point(Vec2(-5.0 * size.x - 0.001, -size.y))


def test_contains_polygon_sampled_rejects_edge_crossing():
    store = StoreArea(ZERO)
    poly = [Vec2(-10.0, -10.0), Vec2(10.0, 10.0)]
    result = store.contains_polygon_sampled(poly, CoverageSamplingOptions())
    assert not result.valid
    assert result.failed_point is not None
    assert result.reason is CoverageFailureReason.POINT_OUTSIDE_OWNED_AREA
    assert not store.contains_point(result.failed_point)


def test_contains_polygon_sampled_accepts_inside_square():
    store = StoreArea(ZERO)
    poly = [Vec2(-100.0, -100.0), Vec2(-20.0, -100.0), Vec2(-20.0, -20.0), Vec2(-100.0, -20.0)]
    result = store.contains_polygon_sampled(poly)
    assert result.valid
    assert result.failed_point is None
    assert result.reason is None


def test_contains_polygon_sampled_empty_polygon():
    store = StoreArea(ZERO)
    result = store.contains_polygon_sampled([])
    assert not result.valid
    assert result.reason is CoverageFailureReason.EMPTY_POLYGON


def test_polygon_on_owned_edge_is_tolerated_by_epsilon():
    store = StoreArea(ZERO)
    # An edge lying exactly on the owned area's top boundary (y == 0).
    poly = [Vec2(-100.0, 0.0), Vec2(-20.0, 0.0), Vec2(-20.0, -50.0)]
    assert store.contains_polygon_sampled(poly).valid


def test_chunk_rect_contains_its_own_coord():
    store = StoreArea(Vec2(17.0, -3.0))
    for coord in store.owned_chunks:
        rect = store.chunk_rect(coord)
        assert store.world_to_chunk_coord(rect.min) == coord
        assert store.contains_point(rect.min)


def test_chunk_world_size_is_cells_times_cell_size():
    store = StoreArea(ZERO)
    assert store.chunk_world_size() == Vec2(128.0, 128.0)


def test_world_bounds_contains_chunk():
    world = WorldBounds()
    assert world.contains_chunk(ChunkCoord(0, 0))
    assert world.contains_chunk(ChunkCoord(-5, -4))
    assert not world.contains_chunk(ChunkCoord(9, 0))
    assert not world.contains_chunk(ChunkCoord(0, -8))