# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of broviewer.

# broviewer is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# broviewer is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with broviewer.  If not, see <https://www.gnu.org/licenses/>.

"""Coordinate helpers for BRO locations.

BRO files deliver positions in RD New (EPSG:28992) or ETRS89 (EPSG:4258). Maps
and GeoJSON need WGS84, so everything funnels through `to_wgs84`, which never
raises: an unknown coordinate system or a failed projection yields None.
"""

import functools
import logging
import math
import re

import pyproj

from broviewer.datamodel import EPSG, EPSG_ETRS89, EPSG_RD_NEW, EPSG_WGS84, X, Y

logger = logging.getLogger(__name__)

# RD New with the fixed 7-parameter Bessel -> WGS84 shift for the Netherlands
RD_NEW_PROJ4 = (
    "+proj=sterea +lat_0=52.1561605555556 +lon_0=5.38763888888889 +k=0.9999079 "
    "+x_0=155000 +y_0=463000 +ellps=bessel "
    "+towgs84=565.4171,50.3319,465.5524,1.9342,-1.6677,9.1019,4.0725 "
    "+units=m +no_defs +type=crs"
)

COORD_SYSTEM_NAMES = {
    EPSG_RD_NEW: "Rijksdriehoekscoördinaten",
    EPSG_ETRS89: "ETRS89",
    EPSG_WGS84: "WGS84",
}

_TRAILING_DIGITS = re.compile(r"(\d+)$")


def normalize_epsg(epsg):
    """Reduce "EPSG:28992", "urn:ogc:def:crs:EPSG::28992" or "28992" to "28992".

    Input without a trailing digit run (including non-strings) is returned unchanged.
    """
    match = _TRAILING_DIGITS.search(str(epsg))
    return match.group(1) if match else epsg


@functools.lru_cache(maxsize=32)
def _transformer_to_wgs84(code):
    if code == EPSG_RD_NEW:
        source_crs = pyproj.CRS.from_proj4(RD_NEW_PROJ4)
    else:
        source_crs = pyproj.CRS.from_epsg(int(code))
    target_crs = pyproj.CRS.from_epsg(4326)
    return pyproj.Transformer.from_crs(source_crs, target_crs, always_xy=True)


def to_wgs84(location):
    """Convert a BRO location mapping to {"lat": ..., "lon": ...} or None.

    EPSG:4326 and EPSG:4258 are passed through with x as latitude and y as
    longitude; ETRS89 is treated as equal to WGS84.
    """
    try:
        code = normalize_epsg(location[EPSG])
        x = float(location[X])
        y = float(location[Y])

        if code in (EPSG_WGS84, EPSG_ETRS89):
            return {"lat": x, "lon": y}

        lon, lat = _transformer_to_wgs84(code).transform(x, y)
    except Exception as exc:
        logger.debug("Could not project location %r to WGS84: %s", location, exc)
        return None

    if not (math.isfinite(lat) and math.isfinite(lon)):
        logger.debug("Projection of %r to WGS84 gave non-finite result", location)
        return None
    return {"lat": lat, "lon": lon}


def get_coord_system_name(epsg):
    code = normalize_epsg(epsg)
    return COORD_SYSTEM_NAMES.get(code, f"EPSG:{code}")
