"""Wall openings (doors, windows) and splitting a wall into solid pieces around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Union

from mallstore.geometry import Vec2


class WallOpeningAnchor(Enum):
    CENTER = "center"
    BOTTOM_CENTER = "bottom_center"


@dataclass(frozen=True)
class RectOpeningShape:
    """A rectangular opening of the given size, positioned by its anchor."""

    width: float
    height: float
    anchor: WallOpeningAnchor = WallOpeningAnchor.CENTER


@dataclass(frozen=True)
class PolygonOpeningShape:
    """A polygonal opening in wall-local coordinates (x = offset, y = height)."""

    vertices: tuple[Vec2, ...] = field(default_factory=tuple)
    anchor: WallOpeningAnchor = WallOpeningAnchor.CENTER


OpeningShape = Union[RectOpeningShape, PolygonOpeningShape]


@dataclass(frozen=True)
class WallOpeningRect:
    """Wall-local rectangle of an opening: offsets along the segment, heights from the floor."""

    offset_min: float
    offset_max: float
    height_min: float
    height_max: float


@dataclass(frozen=True)
class WallPieceRect:
    """A solid rectangular piece of wall to be rendered."""

    offset_min: float
    offset_max: float
    height_min: float
    height_max: float


class UnsupportedShapeError(ValueError):
    """The opening shape cannot be resolved to a rectangle."""


class OpeningValidationReason(Enum):
    ZERO_OR_NEGATIVE_DIMENSION = "zero_or_negative_dimension"
    EXCEEDS_SURFACE_LENGTH = "exceeds_surface_length"
    EXCEEDS_SURFACE_HEIGHT = "exceeds_surface_height"


class WallOpeningValidationError(ValueError):
    """An opening does not fit on its wall surface."""

    def __init__(self, reason: OpeningValidationReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


def derive_opening_rect(
    offset_along_segment: float,
    height_on_wall: float,
    shape: OpeningShape,
) -> WallOpeningRect:
    """Resolve an opening shape at an attachment point to a wall-local rectangle.

    Raises UnsupportedShapeError for polygon shapes.
    """
    if isinstance(shape, PolygonOpeningShape):
        raise UnsupportedShapeError("polygon openings are not supported")
    if not isinstance(shape, RectOpeningShape):
        raise TypeError(f"unknown opening shape: {shape!r}")

    half_w = shape.width * 0.5
    if shape.anchor is WallOpeningAnchor.CENTER:
        half_h = shape.height * 0.5
        height_min, height_max = height_on_wall - half_h, height_on_wall + half_h
    else:
        height_min, height_max = height_on_wall, height_on_wall + shape.height
    return WallOpeningRect(
        offset_along_segment - half_w,
        offset_along_segment + half_w,
        height_min,
        height_max,
    )


def validate_opening(
    opening: WallOpeningRect, surface_length: float, surface_height: float
) -> None:
    """Raise WallOpeningValidationError if the opening does not fit the surface."""
    if opening.offset_min >= opening.offset_max or opening.height_min >= opening.height_max:
        raise WallOpeningValidationError(OpeningValidationReason.ZERO_OR_NEGATIVE_DIMENSION)
    if opening.offset_min < 0.0 or opening.offset_max > surface_length:
        raise WallOpeningValidationError(OpeningValidationReason.EXCEEDS_SURFACE_LENGTH)
    if opening.height_min < 0.0 or opening.height_max > surface_height:
        raise WallOpeningValidationError(OpeningValidationReason.EXCEEDS_SURFACE_HEIGHT)


def split_wall_around_openings(
    surface_length: float,
    surface_height: float,
    openings: Sequence[WallOpeningRect],
) -> list[WallPieceRect]:
    """Cut the openings out of the wall ``[0, length] x [0, height]``.

    Full-height strips fill the gaps between openings; each opening adds a piece
    below and above it where there is wall left. No openings gives one full piece.
    """
    if not openings:
        return [WallPieceRect(0.0, surface_length, 0.0, surface_height)]

    pieces: list[WallPieceRect] = []
    cursor = 0.0

    for opening in sorted(openings, key=lambda o: o.offset_min):
        left = max(opening.offset_min, 0.0)
        right = min(opening.offset_max, surface_length)
        bottom = max(opening.height_min, 0.0)
        top = min(opening.height_max, surface_height)

        if cursor < left:
            pieces.append(WallPieceRect(cursor, left, 0.0, surface_height))
        cursor = max(cursor, right)

        if bottom > 0.0:
            pieces.append(WallPieceRect(left, right, 0.0, bottom))
        if top < surface_height:
            pieces.append(WallPieceRect(left, right, top, surface_height))

    if cursor < surface_length:
        pieces.append(WallPieceRect(cursor, surface_length, 0.0, surface_height))

    return pieces