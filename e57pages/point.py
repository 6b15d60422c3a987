"""High level point attributes: coordinates, colors and grid indices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class CartesianValid:
    """A fully valid Cartesian coordinate."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class CartesianDirection:
    """A Cartesian direction vector, not necessarily normalized."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class CartesianInvalid:
    """A Cartesian coordinate without meaning, or no Cartesian data at all."""


@dataclass(frozen=True)
class SphericalValid:
    """A fully valid spherical coordinate."""

    range: float
    azimuth: float
    elevation: float


@dataclass(frozen=True)
class SphericalDirection:
    """A spherical coordinate that only defines a direction, without range."""

    azimuth: float
    elevation: float


@dataclass(frozen=True)
class SphericalInvalid:
    """A spherical coordinate without meaning, or no spherical data at all."""


CartesianCoordinate = Union[CartesianValid, CartesianDirection, CartesianInvalid]
SphericalCoordinate = Union[SphericalValid, SphericalDirection, SphericalInvalid]


@dataclass(frozen=True)
class Color:
    """RGB point color; normalized to 0..1 when read with normalization enabled."""

    red: float
    green: float
    blue: float


@dataclass
class Point:
    """A point with its coordinates, color, intensity and grid position.

    ``color`` and ``intensity`` are ``None`` when missing or invalid.
    ``row`` and ``column`` are -1 for point clouds without grid indices.
    """

    cartesian: CartesianCoordinate = field(default_factory=CartesianInvalid)
    spherical: SphericalCoordinate = field(default_factory=SphericalInvalid)
    color: Optional[Color] = None
    intensity: Optional[float] = None
    row: int = -1
    column: int = -1