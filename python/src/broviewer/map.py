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


"""Folium map of survey locations."""

import logging

import folium
import pandas as pd

from broviewer.crs import get_coord_system_name, to_wgs84
from broviewer.datamodel import BHR_G, BHR_GT, BRO_ID, CPT, EPSG, X, Y, data_type, get_location
from broviewer.extent import Extent

logger = logging.getLogger(__name__)

# (lat_min, lat_max, lon_min, lon_max) of the Netherlands
NL_BOUNDS = (50.0, 54.0, 3.0, 8.0)

MARKER_COLORS = {
    CPT: "#2563eb",
    BHR_GT: "#ea580c",
    BHR_G: "#16a34a",
}
SELECTED_COLOR = "#dc2626"

LOCATION_COLUMNS = ["filename", "lat", "lon", "fileType", "broId", "epsg", "x", "y"]


def create_leaflet_map(center=None, zoom_start=2):
    """Create a Leaflet map with OpenStreetMap tiles."""

    if center is None:
        center = [0, 0]
    m = folium.Map(location=center, zoom_start=zoom_start, tiles="OpenStreetMap")
    return m


def bounds_extent(bounds=NL_BOUNDS):
    """Extent of a (lat_min, lat_max, lon_min, lon_max) box."""
    lat_min, lat_max, lon_min, lon_max = bounds
    return Extent(xmin=lon_min, xmax=lon_max, ymin=lat_min, ymax=lat_max, name="bounds")


def extract_location(filename, record, bounds=NL_BOUNDS):
    """Map location of a record, or None when it cannot be placed.

    Positions outside `bounds` are swapped when the swapped pair falls inside,
    otherwise the record is left off the map.
    """
    location = get_location(record)
    if not location:
        return None
    wgs84 = to_wgs84(location)
    if wgs84 is None:
        return None

    lat, lon = wgs84["lat"], wgs84["lon"]
    area = bounds_extent(bounds)
    if not area.contains(lon, lat):
        if area.contains(lat, lon):
            lat, lon = lon, lat
        else:
            logger.debug("Leaving %s off the map: (%s, %s) outside %s", filename, lat, lon, bounds)
            return None

    return {
        "filename": filename,
        "lat": lat,
        "lon": lon,
        "fileType": data_type(record),
        "broId": record.get(BRO_ID),
        "epsg": location.get(EPSG),
        "x": location.get(X),
        "y": location.get(Y),
    }


def map_survey_points(records, bounds=NL_BOUNDS):
    """Placeable survey locations as a DataFrame.

    Parameters
    ----------
    records : mapping
        filename -> parsed record.
    bounds : tuple, optional
        (lat_min, lat_max, lon_min, lon_max) sanity box.

    Returns
    -------
    pandas.DataFrame
        One row per placeable record with LOCATION_COLUMNS.
    """
    rows = []
    for filename, record in records.items():
        loc = extract_location(filename, record, bounds=bounds)
        if loc is not None:
            rows.append(loc)
    return pd.DataFrame(rows, columns=LOCATION_COLUMNS)


def _popup_html(row):
    lines = [f"<strong>{row['filename']}</strong>"]
    if row["broId"]:
        lines.append(f"BRO ID: {row['broId']}")
    lines.append(f"{get_coord_system_name(row['epsg'])}: {row['x']:.2f}, {row['y']:.2f}")
    lines.append(f"Lat/Lng: {row['lat']:.6f}, {row['lon']:.6f}")
    return "<br/>".join(lines)


def plot_survey_map(records, selected=None, bounds=NL_BOUNDS, zoom_start=8):
    """Folium map with one circle marker per placeable record.

    The selected filename is drawn larger and in red. The view is fitted to
    the extent of all markers.
    """
    points = map_survey_points(records, bounds=bounds)
    if points.empty:
        return create_leaflet_map(center=list(bounds_extent(bounds).center()), zoom_start=7)

    extent = Extent.from_locations(points.to_dict("records"), name="surveys")
    m = create_leaflet_map(center=list(extent.center()), zoom_start=zoom_start)

    for _, row in points.iterrows():
        is_selected = row["filename"] == selected
        folium.CircleMarker(
            location=[row["lat"], row["lon"]],
            radius=10 if is_selected else 8,
            color="#fff",
            weight=3 if is_selected else 2,
            opacity=1,
            fill=True,
            fill_color=SELECTED_COLOR if is_selected else MARKER_COLORS.get(row["fileType"], MARKER_COLORS[CPT]),
            fill_opacity=0.8,
            popup=folium.Popup(_popup_html(row), max_width=300),
            tooltip=row["filename"],
        ).add_to(m)

    m.fit_bounds(extent.get_folium_rectangle(), padding=(50, 50))
    return m
