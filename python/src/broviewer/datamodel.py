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

"""
BRO record data model

Parsed BRO records are plain mappings as produced by the BRO XML parser. Record
level fields are snake_case, measurement and layer rows keep the parser's
camelCase keys. The `meta.dataType` discriminator is the only dispatch key.
"""

# Survey types
CPT = "CPT"
BHR_G = "BHR-G"
BHR_GT = "BHR-GT"
DATA_TYPES = (CPT, BHR_G, BHR_GT)

# EPSG codes with dedicated handling
EPSG_WGS84 = "4326"
EPSG_ETRS89 = "4258"
EPSG_RD_NEW = "28992"

# Record fields shared by all survey types
META = "meta"
DATA_TYPE = "dataType"
SCHEMA_VERSION = "schemaVersion"
DATA = "data"
BRO_ID = "bro_id"
QUALITY_REGIME = "quality_regime"
REPORT_DATE = "research_report_date"
DELIVERED_LOCATION = "delivered_location"
STANDARDIZED_LOCATION = "standardized_location"
VERTICAL_OFFSET = "delivered_vertical_position_offset"
VERTICAL_DATUM = "delivered_vertical_position_datum"
VERTICAL_REFERENCE_POINT = "delivered_vertical_position_reference_point"
GROUNDWATER_LEVEL = "groundwater_level"

# Survey type specific depth fields
FINAL_DEPTH = "final_depth"
FINAL_BORE_DEPTH = "final_bore_depth"
ANALYSIS = "analysis"

# Measurement and layer row keys
PENETRATION_LENGTH = "penetrationLength"
DEPTH = "depth"
ELAPSED_TIME = "elapsedTime"
UPPER_BOUNDARY = "upperBoundary"
LOWER_BOUNDARY = "lowerBoundary"

# Location keys
EPSG = "epsg"
X = "x"
Y = "y"


class UnknownDataTypeError(ValueError):
    """Raised when a record carries a dataType outside CPT, BHR-G and BHR-GT."""

    def __init__(self, data_type):
        self.data_type = data_type
        super().__init__(f"Unknown BRO data type: {data_type!r}")


def data_type(record):
    meta = record.get(META) or {}
    return meta.get(DATA_TYPE)


def is_cpt(record):
    return data_type(record) == CPT


def is_bhrg(record):
    return data_type(record) == BHR_G


def is_bhrgt(record):
    return data_type(record) == BHR_GT


def require_data_type(record):
    """Return the record's dataType, raising UnknownDataTypeError for anything else."""
    dtype = data_type(record)
    if dtype not in DATA_TYPES:
        raise UnknownDataTypeError(dtype)
    return dtype


def get_final_depth(record):
    """Final depth of any survey type.

    CPT records report `final_depth`, both borehole types `final_bore_depth`.
    Dispatch is on the discriminator only, never on which field happens to be filled.
    """
    dtype = require_data_type(record)
    if dtype == CPT:
        return record.get(FINAL_DEPTH)
    return record.get(FINAL_BORE_DEPTH)


def get_location(record):
    """Standardized location when present, else the delivered one, else None."""
    return record.get(STANDARDIZED_LOCATION) or record.get(DELIVERED_LOCATION) or None


def get_rows(record):
    return list(record.get(DATA) or [])
