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

"""Chart axis detection for CPT measurement data."""

from collections import namedtuple

from broviewer.datamodel import DEPTH, ELAPSED_TIME, PENETRATION_LENGTH, get_rows

ChartColumn = namedtuple("ChartColumn", ["key", "unit", "name"])

# Display metadata for every CPT measurement field, in presentation order.
CPT_COLUMN_METADATA = {
    "penetrationLength": ("Penetration Length", "m"),
    "depth": ("Depth", "m"),
    "elapsedTime": ("Elapsed Time", "s"),
    "coneResistance": ("Cone Resistance (qc)", "MPa"),
    "correctedConeResistance": ("Corrected Cone Resistance (qt)", "MPa"),
    "netConeResistance": ("Net Cone Resistance (qn)", "MPa"),
    "localFriction": ("Sleeve Friction (fs)", "MPa"),
    "frictionRatio": ("Friction Ratio (Rf)", "%"),
    "porePressureU1": ("Pore Pressure U1", "MPa"),
    "porePressureU2": ("Pore Pressure U2", "MPa"),
    "porePressureU3": ("Pore Pressure U3", "MPa"),
    "poreRatio": ("Pore Ratio", "-"),
    "inclinationX": ("Inclination X", "°"),
    "inclinationY": ("Inclination Y", "°"),
    "inclinationEW": ("Inclination EW", "°"),
    "inclinationNS": ("Inclination NS", "°"),
    "inclinationResultant": ("Inclination Resultant", "°"),
    "magneticFieldStrengthX": ("Magnetic Field X", "nT"),
    "magneticFieldStrengthY": ("Magnetic Field Y", "nT"),
    "magneticFieldStrengthZ": ("Magnetic Field Z", "nT"),
    "magneticFieldStrengthTotal": ("Magnetic Field Total", "nT"),
    "magneticInclination": ("Magnetic Inclination", "°"),
    "magneticDeclination": ("Magnetic Declination", "°"),
    "electricalConductivity": ("Electrical Conductivity", "mS/m"),
    "temperature": ("Temperature", "°C"),
}

# Default axis choice is the first key present in each chain, then the first option.
Y_AXIS_PREFERENCE = (PENETRATION_LENGTH, DEPTH)
X_AXIS_PREFERENCE = ("coneResistance", "correctedConeResistance", "frictionRatio")

# Never plotted as a dependent series
NON_SERIES_KEYS = (PENETRATION_LENGTH, DEPTH, ELAPSED_TIME)


def get_chart_column(key):
    """ChartColumn for a known measurement key, or None."""
    meta = CPT_COLUMN_METADATA.get(key)
    if meta is None:
        return None
    name, unit = meta
    return ChartColumn(key=key, unit=unit, name=name)


def get_available_columns(rows):
    """Columns defined on the first measurement row; explicit None still counts."""
    if not rows:
        return []
    first_row = rows[0]
    return [get_chart_column(key) for key in CPT_COLUMN_METADATA if key in first_row]


def _pick(columns, preference):
    by_key = {col.key: col for col in columns}
    for key in preference:
        if key in by_key:
            return by_key[key]
    return columns[0] if columns else None


def detect_chart_axes(record):
    """Pick default chart axes for a CPT record.

    Returns a dict with:
    - y_axis: penetration length, else depth, else None
    - x_axis: cone resistance, then corrected cone resistance, then friction ratio,
      else the first plottable column
    - available_columns: plottable columns (depth and time excluded)
    - y_axis_options: depth-like columns
    """
    columns = get_available_columns(get_rows(record))

    y_axis_options = [col for col in columns if col.key in Y_AXIS_PREFERENCE]
    x_candidates = [col for col in columns if col.key not in NON_SERIES_KEYS]

    return {
        "y_axis": _pick(y_axis_options, Y_AXIS_PREFERENCE),
        "x_axis": _pick(x_candidates, X_AXIS_PREFERENCE),
        "available_columns": x_candidates,
        "y_axis_options": y_axis_options,
    }
