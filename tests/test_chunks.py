from mallstore.chunks import (
    ChunkBounds,
    ChunkCoord,
    ChunkData,
    ChunkKind,
    ExpansionPolicy,
    owned_bounds,
    side_neighbors,
    would_create_hole,
)


def data():
    return ChunkData(kind=ChunkKind.DEFAULT)


def test_side_neighbors_are_cardinal_only():
    n = side_neighbors(ChunkCoord(0, 0))
    assert len(n) == 4
    assert ChunkCoord(-1, 0) in n
    assert ChunkCoord(1, 0) in n
    assert ChunkCoord(0, -1) in n
    assert ChunkCoord(0, 1) in n
    assert ChunkCoord(1, 1) not in n


def test_detects_simple_enclosed_hole():
    chunks = {
        coord: data()
        for coord in [
            ChunkCoord(-1, -1),
            ChunkCoord(0, -1),
            ChunkCoord(1, -1),
            ChunkCoord(-1, 0),
            ChunkCoord(1, 0),
            ChunkCoord(-1, 1),
            ChunkCoord(0, 1),
        ]
    }
    assert would_create_hole(chunks, ChunkCoord(1, 1))


def test_adding_to_solid_block_does_not_create_hole():
    chunks = {ChunkCoord(0, 0): data()}
    assert not would_create_hole(chunks, ChunkCoord(1, 0))


def test_diagonal_purchase_does_not_enclose_space():
    chunks = {ChunkCoord(0, 0): data()}
    assert not would_create_hole(chunks, ChunkCoord(1, 1))


def test_large_solid_block_no_hole():
    chunks = {ChunkCoord(x, y): data() for x in range(5) for y in range(5)}
    assert not would_create_hole(chunks, ChunkCoord(5, 0))


def test_would_create_hole_does_not_mutate_input():
    chunks = {ChunkCoord(0, 0): data()}
    would_create_hole(chunks, ChunkCoord(1, 0))
    assert set(chunks) == {ChunkCoord(0, 0)}


def test_owned_bounds_empty_is_none():
    assert owned_bounds({}) is None


def test_owned_bounds_covers_all_coords():
    chunks = {ChunkCoord(x, y): data() for x in range(-5, 0) for y in range(-4, 0)}
    assert owned_bounds(chunks) == ChunkBounds(ChunkCoord(-5, -4), ChunkCoord(-1, -1))


def test_default_expansion_policy():
    policy = ExpansionPolicy()
    assert policy.allow_left and policy.allow_down
    assert not policy.allow_right and not policy.allow_up
    assert policy.require_side_adjacency and policy.forbid_holes