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


import shapely.geometry


class Extent():

    def __init__(self, xmin=None, xmax=None, ymin=None, ymax=None, bbox=None, name=None, crs=4326):
        """
        Axis-aligned bounding box with a name and coordinate reference system (CRS).

        Pass either:
        @param bbox - the bounding box as a shapely.geometry.box object
        OR
        @param xmin, xmax, ymin, ymax - the coordinates of the bounding box edges

        @param name - optional name for the extent
        @param crs - coordinate reference system (default is 4326, x = lon, y = lat)
        """
        if bbox is None:
            bbox = shapely.geometry.box(xmin, ymin, xmax, ymax)
        self.bbox = bbox
        self.set_minmax()
        self.name = name
        self.crs = crs

    @classmethod
    def from_points(cls, points, name=None, crs=4326):
        """Extent around (x, y) points, or None when there are none."""
        points = list(points)
        if not points:
            return None
        hull = shapely.geometry.MultiPoint(points)
        return cls(bbox=shapely.geometry.box(*hull.bounds), name=name, crs=crs)

    @classmethod
    def from_locations(cls, locations, name=None):
        """WGS84 extent of {"lat", "lon"} mappings."""
        return cls.from_points(((loc["lon"], loc["lat"]) for loc in locations), name=name, crs=4326)

    def set_minmax(self):
        self.xmin, self.ymin, self.xmax, self.ymax = self.bbox.bounds

    def contains(self, x, y):
        return self.bbox.covers(shapely.geometry.Point(x, y))

    def get_folium_rectangle(self):
        """Bounds formatted for folium: [[south, west], [north, east]]."""
        xmin, ymin, xmax, ymax = self.bbox.bounds
        return [[ymin, xmin], [ymax, xmax]]

    def center(self):
        """Return the bbox center as (y, x), which is (lat, lon) for WGS84."""
        xmin, ymin, xmax, ymax = self.bbox.bounds
        return (ymin + ymax) / 2.0, (xmin + xmax) / 2.0
