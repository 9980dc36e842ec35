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

"""Display formatting for dates, numbers and locations."""

import datetime

from broviewer.datamodel import EPSG, EPSG_ETRS89, EPSG_RD_NEW, X, Y


def iso_date(value):
    """ISO date string (YYYY-MM-DD) for a date or datetime, None for None.

    Timezone-aware datetimes are converted to UTC first.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return str(value)[:10]


def format_date(value):
    return iso_date(value) or ""


def format_number(value):
    """Plain number text; integral floats drop the trailing ".0"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_coord_system(epsg):
    if epsg == EPSG_RD_NEW:
        return "RD"
    if epsg == EPSG_ETRS89:
        return "ETRS89"
    raise ValueError(f"Invalid EPSG code: {epsg!r}")


def format_location_value(location, precision=2):
    coord_system = format_coord_system(location[EPSG])
    return f"{coord_system}: {location[X]:.{precision}f}, {location[Y]:.{precision}f}"


def format_delivered_location(location):
    return f"{location[EPSG]} - X: {location[X]:.2f}, Y: {location[Y]:.2f}"


def format_standardized_location(location):
    return f"{location[EPSG]} - {location[X]:.6f}, {location[Y]:.6f}"
