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

"""CSV, JSON and GeoJSON export of parsed BRO records.

CSV flattens the measurement or layer rows of one record; absent values become
empty cells. JSON keeps a nested record with explicit nulls for every documented
field that was not delivered. GeoJSON collects one Point feature per record
that can be placed on a WGS84 map; records that cannot be placed are skipped.
"""

import datetime
import json
import logging
import math
import re

import geopandas as gpd
import pandas as pd
import shapely.geometry

from broviewer.crs import to_wgs84
from broviewer.datamodel import (
    BHR_G,
    BHR_GT,
    BRO_ID,
    CPT,
    DATA_TYPE,
    EPSG,
    GROUNDWATER_LEVEL,
    META,
    QUALITY_REGIME,
    REPORT_DATE,
    SCHEMA_VERSION,
    STANDARDIZED_LOCATION,
    VERTICAL_DATUM,
    VERTICAL_OFFSET,
    VERTICAL_REFERENCE_POINT,
    X,
    Y,
    get_final_depth,
    get_location,
    get_rows,
    require_data_type,
)
from broviewer.format import iso_date

logger = logging.getLogger(__name__)

CSV_MIME_TYPE = "text/csv;charset=utf-8;"
JSON_MIME_TYPE = "application/json;charset=utf-8;"
GEOJSON_MIME_TYPE = "application/geo+json"
GEOJSON_FILENAME = "bro-locations.geojson"

# Layer fields exported per borehole type, in column order
BHR_GT_LAYER_FIELDS = (
    "upperBoundary",
    "lowerBoundary",
    "geotechnicalSoilName",
    "color",
    "organicMatterContentClass",
    "sandMedianClass",
    "dispersedInhomogeneity",
)

BHR_G_LAYER_FIELDS = (
    "upperBoundary",
    "lowerBoundary",
    "soilNameNEN5104",
    "color",
    "anthropogenic",
    "rooted",
    "organicMatterContentClassNEN5104",
    "gravelContentClass",
    "carbonateContentClass",
    "sandMedianClass",
)

LAYER_FIELDS = {
    BHR_GT: BHR_GT_LAYER_FIELDS,
    BHR_G: BHR_G_LAYER_FIELDS,
}

# JSON key -> (determination, value field) for the flattened lab interval summary
ANALYSIS_VALUES = {
    "waterContent": ("waterContentDetermination", "waterContent"),
    "organicMatterContent": ("organicMatterContentDetermination", "organicMatterContent"),
    "carbonateContent": ("carbonateContentDetermination", "carbonateContent"),
    "bulkDensity": ("volumetricMassDensityDetermination", "volumetricMassDensity"),
    "particleDensity": ("volumetricMassDensityOfSolidsDetermination", "volumetricMassDensityOfSolids"),
    "liquidLimit": ("consistencyLimitsDetermination", "liquidLimit"),
    "plasticLimit": ("consistencyLimitsDetermination", "plasticLimit"),
    "plasticityIndex": ("consistencyLimitsDetermination", "plasticityIndex"),
}

_XML_SUFFIX = re.compile(r"\.xml$", re.IGNORECASE)


def csv_filename(filename):
    return _XML_SUFFIX.sub(".csv", filename)


def json_filename(filename):
    return _XML_SUFFIX.sub(".json", filename)


def _csv_cell(value):
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _layer_rows(layers, fields):
    return [{field: layer.get(field) for field in fields} for layer in layers]


def csv_rows(record):
    """Rows that make up the CSV export of a record.

    CPT records export every measurement field; borehole records a fixed set of
    layer fields.
    """
    dtype = require_data_type(record)
    rows = get_rows(record)
    if dtype == CPT:
        return [dict(row) for row in rows]
    return _layer_rows(rows, LAYER_FIELDS[dtype])


def bro_data_to_csv(record):
    """CSV text of a record's rows; "" when there are none.

    Columns are the union of row keys in first-seen order. Cells are kept as
    objects so integers are not widened to floats by missing values.
    """
    rows = csv_rows(record)
    if not rows:
        return ""
    columns = list(dict.fromkeys(key for row in rows for key in row))
    cells = [[_csv_cell(row.get(key)) for key in columns] for row in rows]
    df = pd.DataFrame(cells, columns=columns, dtype=object)
    return df.to_csv(index=False, lineterminator="\n")


def _location_json(location):
    if not location:
        return None
    return {"epsg": location.get(EPSG), "x": location.get(X), "y": location.get(Y)}


def _cpt_json(record):
    cpt_metadata = {
        "cptStandard": record.get("cpt_standard"),
        "qualityClass": record.get("quality_class"),
        "predrilledDepth": record.get("predrilled_depth"),
        "finalDepth": record.get("final_depth"),
        "groundwaterLevel": record.get(GROUNDWATER_LEVEL),
        "dissipationtestPerformed": record.get("dissipationtest_performed"),
        "equipment": {
            "description": record.get("cpt_description"),
            "type": record.get("cpt_type"),
            "coneSurfaceArea": record.get("cone_surface_area"),
            "coneDiameter": record.get("cone_diameter"),
            "coneSurfaceQuotient": record.get("cone_surface_quotient"),
            "coneToFrictionSleeveDistance": record.get("cone_to_friction_sleeve_distance"),
            "frictionSleeveSurfaceArea": record.get("cone_to_friction_sleeve_surface_area"),
            "frictionSleeveSurfaceQuotient": record.get("cone_to_friction_sleeve_surface_quotient"),
        },
        "zeroLoadMeasurements": {
            "coneResistanceBefore": record.get("zlm_cone_resistance_before"),
            "coneResistanceAfter": record.get("zlm_cone_resistance_after"),
            "localFrictionBefore": record.get("zlm_local_friction_before"),
            "localFrictionAfter": record.get("zlm_local_friction_after"),
            "inclinationResultantBefore": record.get("zlm_inclination_resultant_before"),
            "inclinationResultantAfter": record.get("zlm_inclination_resultant_after"),
        },
    }
    measurements = [dict(row) for row in get_rows(record)]
    return {"cptMetadata": cpt_metadata, "measurements": measurements}


def _analysis_json(analysis):
    intervals = []
    for interval in analysis.get("investigatedIntervals") or []:
        entry = {
            "beginDepth": interval.get("beginDepth"),
            "endDepth": interval.get("endDepth"),
            "sampleQuality": interval.get("sampleQuality"),
            "analysisType": interval.get("analysisType"),
        }
        for key, (determination, field) in ANALYSIS_VALUES.items():
            found = interval.get(determination)
            entry[key] = found.get(field) if isinstance(found, dict) else None
        intervals.append(entry)
    return {
        "reportDate": iso_date(analysis.get("analysisReportDate")),
        "procedure": analysis.get("analysisProcedure"),
        "intervals": intervals,
    }


def _bore_json(record, dtype):
    bore_metadata = {
        "descriptionProcedure": record.get("description_procedure"),
        "finalBoreDepth": record.get("final_bore_depth"),
        "finalSampleDepth": record.get("final_sample_depth"),
    }
    if dtype == BHR_GT:
        bore_metadata["groundwaterLevel"] = record.get(GROUNDWATER_LEVEL)
    bore_metadata["boreRockReached"] = record.get("bore_rock_reached")
    bore_metadata["boreHoleCompleted"] = record.get("bore_hole_completed")

    out = {
        "boreMetadata": bore_metadata,
        "layers": _layer_rows(get_rows(record), LAYER_FIELDS[dtype]),
    }
    if dtype == BHR_GT and record.get("analysis"):
        out["analysis"] = _analysis_json(record["analysis"])
    return out


def _nan_to_none(value):
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, dict):
        return {key: _nan_to_none(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_nan_to_none(item) for item in value]
    return value


def bro_data_to_json(record):
    """Nested, JSON-ready view of a record. Undelivered fields are kept as None."""
    dtype = require_data_type(record)
    meta = record.get(META) or {}

    out = {
        "broId": record.get(BRO_ID),
        "qualityRegime": record.get(QUALITY_REGIME),
        "dataType": meta.get(DATA_TYPE),
        "schemaVersion": meta.get(SCHEMA_VERSION),
        "reportDate": iso_date(record.get(REPORT_DATE)),
        "metadata": {
            "location": _location_json(get_location(record)),
            "standardizedLocation": _location_json(record.get(STANDARDIZED_LOCATION)),
            "verticalPosition": {
                "offset": record.get(VERTICAL_OFFSET),
                "datum": record.get(VERTICAL_DATUM),
                "referencePoint": record.get(VERTICAL_REFERENCE_POINT),
            },
        },
    }
    if dtype == CPT:
        out.update(_cpt_json(record))
    else:
        out.update(_bore_json(record, dtype))
    return _nan_to_none(out)


def _json_default(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return iso_date(value)
    if hasattr(value, "item"):
        # numpy scalars
        return value.item()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps_bro_data(record, indent=2):
    return json.dumps(bro_data_to_json(record), indent=indent, ensure_ascii=False, allow_nan=False, default=_json_default)


def _feature(filename, record):
    location = get_location(record)
    if not location:
        logger.debug("Skipping %s in GeoJSON export: no location", filename)
        return None
    wgs84 = to_wgs84(location)
    if wgs84 is None:
        logger.debug("Skipping %s in GeoJSON export: location %r cannot be projected", filename, location)
        return None

    geometry = shapely.geometry.mapping(shapely.geometry.Point(wgs84["lon"], wgs84["lat"]))
    return {
        "type": "Feature",
        "geometry": {"type": geometry["type"], "coordinates": list(geometry["coordinates"])},
        "properties": {
            "filename": filename,
            "broId": record.get(BRO_ID),
            "fileType": require_data_type(record),
            "qualityRegime": record.get(QUALITY_REGIME),
            "reportDate": iso_date(record.get(REPORT_DATE)),
            "surfaceElevation": record.get(VERTICAL_OFFSET),
            "verticalDatum": record.get(VERTICAL_DATUM),
            "coordinateSystem": location.get(EPSG),
            "easting": location.get(X),
            "northing": location.get(Y),
            "finalDepth": get_final_depth(record),
        },
    }


def create_geojson(records):
    """FeatureCollection with one Point per locatable record.

    `records` maps filename -> parsed record.
    """
    features = []
    for filename, record in records.items():
        feature = _feature(filename, record)
        if feature is not None:
            features.append(_nan_to_none(feature))
    if len(features) < len(records):
        logger.info("GeoJSON export placed %d of %d records", len(features), len(records))
    return {"type": "FeatureCollection", "features": features}


def dumps_geojson(records, indent=2):
    return json.dumps(create_geojson(records), indent=indent, ensure_ascii=False, allow_nan=False, default=_json_default)


def to_geodataframe(records):
    """GeoDataFrame (EPSG:4326) of the locatable records, one row per feature."""
    collection = create_geojson(records)
    if not collection["features"]:
        return gpd.GeoDataFrame(geometry=[], crs="EPSG:4326")
    return gpd.GeoDataFrame.from_features(collection["features"], crs="EPSG:4326")
