"""Post-processing of points: coordinate conversion, intensity fallback, pose."""

from __future__ import annotations

import math
from typing import Sequence

from e57pages.point import (
    CartesianDirection,
    CartesianValid,
    Color,
    Point,
    SphericalDirection,
    SphericalValid,
)


def rotation_matrix(w: float, x: float, y: float, z: float) -> tuple[float, ...]:
    """Return the column-major 3x3 rotation matrix of the quaternion (w, x, y, z)."""
    return (
        w * w + x * x - y * y - z * z,
        2.0 * (x * y + w * z),
        2.0 * (x * z - w * y),
        2.0 * (x * y - w * z),
        w * w + y * y - x * x - z * z,
        2.0 * (y * z + w * x),
        2.0 * (x * z + w * y),
        2.0 * (y * z - w * x),
        w * w + z * z - x * x - y * y,
    )


def transform_point(
    point: Point, rotation: Sequence[float], translation: Sequence[float]
) -> Point:
    """Rotate and translate a valid Cartesian coordinate in place."""
    coord = point.cartesian
    if isinstance(coord, CartesianValid):
        r = rotation
        tx, ty, tz = translation
        x, y, z = coord.x, coord.y, coord.z
        nx = r[0] * x + r[3] * y + r[6] * z
        ny = r[1] * x + r[4] * y + r[7] * z
        nz = r[2] * x + r[5] * y + r[8] * z
        point.cartesian = CartesianValid(nx + tx, ny + ty, nz + tz)
    return point


def convert_to_cartesian(point: Point) -> Point:
    """Fill in Cartesian data from spherical data where Cartesian data is missing."""
    if isinstance(point.cartesian, CartesianValid):
        return point
    spherical = point.spherical
    if isinstance(spherical, SphericalValid):
        cos_ele = math.cos(spherical.elevation)
        point.cartesian = CartesianValid(
            x=spherical.range * cos_ele * math.cos(spherical.azimuth),
            y=spherical.range * cos_ele * math.sin(spherical.azimuth),
            z=spherical.range * math.sin(spherical.elevation),
        )
        return point
    if isinstance(point.cartesian, CartesianDirection):
        return point
    if isinstance(spherical, SphericalDirection):
        cos_ele = math.cos(spherical.elevation)
        point.cartesian = CartesianDirection(
            x=cos_ele * math.cos(spherical.azimuth),
            y=cos_ele * math.sin(spherical.azimuth),
            z=math.sin(spherical.elevation),
        )
    return point


def _asin_ratio(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        return math.nan
    return math.asin(numerator / denominator)


def convert_to_spherical(point: Point) -> Point:
    """Fill in spherical data from Cartesian data where spherical data is missing."""
    if isinstance(point.spherical, SphericalValid):
        return point
    cartesian = point.cartesian
    if isinstance(cartesian, CartesianValid):
        x, y, z = cartesian.x, cartesian.y, cartesian.z
        r = math.sqrt(x * x + y * y + z * z)
        point.spherical = SphericalValid(
            range=r, azimuth=math.atan2(y, x), elevation=_asin_ratio(z, r)
        )
        return point
    if isinstance(point.spherical, SphericalDirection):
        return point
    if isinstance(cartesian, CartesianDirection):
        x, y, z = cartesian.x, cartesian.y, cartesian.z
        point.spherical = SphericalDirection(
            azimuth=math.atan2(y, x),
            elevation=_asin_ratio(z, math.sqrt(x * x + y * y + z * z)),
        )
    return point


def convert_intensity(point: Point) -> Point:
    """Use the intensity as grey color when the point has no valid color."""
    if point.color is None and point.intensity is not None:
        value = point.intensity
        point.color = Color(red=value, green=value, blue=value)
    return point