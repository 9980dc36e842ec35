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

import io
import json

import pandas as pd
import pytest

from broviewer.datamodel import UnknownDataTypeError
from broviewer.survey import export


def _read_csv(text):
    return pd.read_csv(io.StringIO(text), keep_default_na=False, dtype=str)


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def test_cpt_csv_exports_all_measurement_columns(cpt_record):
    df = _read_csv(export.bro_data_to_csv(cpt_record))
    assert list(df.columns) == ["penetrationLength", "depth", "coneResistance", "localFriction", "frictionRatio"]
    assert len(df) == 3
    assert df.loc[1, "localFriction"] == ""
    assert float(df.loc[2, "coneResistance"]) == pytest.approx(2.1)


def test_bhrg_csv_uses_layer_fields(bhrg_record):
    df = _read_csv(export.bro_data_to_csv(bhrg_record))
    assert list(df.columns) == list(export.BHR_G_LAYER_FIELDS)
    # second layer carries no colour
    assert df.loc[1, "color"] == ""
    assert df.loc[0, "color"] == "bruin"
    assert df.loc[0, "anthropogenic"] == "true"
    assert df.loc[0, "rooted"] == "false"
    assert (df["gravelContentClass"] == "").all()


def test_bhrgt_csv_uses_geotechnical_fields(bhrgt_record):
    df = _read_csv(export.bro_data_to_csv(bhrgt_record))
    assert list(df.columns) == list(export.BHR_GT_LAYER_FIELDS)
    assert df.loc[0, "geotechnicalSoilName"] == "zwakZandigeKleiMetGrind"
    assert df.loc[1, "color"] == ""


def test_csv_without_rows_is_empty(cpt_record):
    cpt_record["data"] = []
    assert export.bro_data_to_csv(cpt_record) == ""


def test_csv_keeps_integers_and_fills_missing_cells():
    record = {
        "meta": {"dataType": "CPT"},
        "data": [{"penetrationLength": 1, "coneResistance": 2}, {"penetrationLength": 2}],
    }
    assert export.bro_data_to_csv(record) == "penetrationLength,coneResistance\n1,2\n2,\n"


def test_unknown_data_type_is_rejected():
    with pytest.raises(UnknownDataTypeError):
        export.bro_data_to_csv({"meta": {"dataType": "SFR"}, "data": [{"a": 1}]})
    with pytest.raises(UnknownDataTypeError):
        export.bro_data_to_json({"meta": {}})


def test_download_filenames():
    assert export.csv_filename("CPT000000012345.XML") == "CPT000000012345.csv"
    assert export.json_filename("survey.xml") == "survey.json"
    assert export.csv_filename("notes.txt") == "notes.txt"


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def test_cpt_json_keeps_explicit_nulls(cpt_record):
    cpt_record["data"][0]["coneResistance"] = float("nan")
    out = export.bro_data_to_json(cpt_record)
    assert out["dataType"] == "CPT"
    assert out["reportDate"] == "2021-03-04"
    assert "predrilledDepth" in out["cptMetadata"]
    assert out["cptMetadata"]["predrilledDepth"] is None
    assert out["cptMetadata"]["finalDepth"] == 20.5
    assert all(value is None for value in out["cptMetadata"]["zeroLoadMeasurements"].values())
    assert out["measurements"][0]["coneResistance"] is None
    assert out["measurements"][1]["localFriction"] is None
    assert out["metadata"]["location"]["x"] == 155000.0
    assert out["metadata"]["standardizedLocation"] is None


def test_bhrg_json_has_no_groundwater_or_analysis(bhrg_record):
    out = export.bro_data_to_json(bhrg_record)
    assert "groundwaterLevel" not in out["boreMetadata"]
    assert "analysis" not in out
    assert out["boreMetadata"]["finalBoreDepth"] == 5.0
    assert out["layers"][1]["color"] is None
    # standardized location wins
    assert out["metadata"]["location"]["epsg"] == "EPSG:4258"


def test_bhrgt_json_includes_analysis(bhrgt_record):
    out = export.bro_data_to_json(bhrgt_record)
    assert out["reportDate"] is None
    assert out["boreMetadata"]["groundwaterLevel"] == 1.1
    intervals = out["analysis"]["intervals"]
    assert out["analysis"]["reportDate"] == "2020-01-02"
    assert intervals[0]["waterContent"] == 23.5
    assert intervals[0]["liquidLimit"] is None
    assert intervals[1]["plasticityIndex"] == 20.0


def test_dumps_bro_data_writes_nulls(cpt_record):
    text = export.dumps_bro_data(cpt_record)
    assert '"predrilledDepth": null' in text
    assert json.loads(text)["broId"] == "CPT000000012345"


def test_dumps_bro_data_writes_nan_metadata_as_null(cpt_record):
    cpt_record["final_depth"] = float("nan")
    cpt_record["data"][0]["coneResistance"] = float("nan")
    text = export.dumps_bro_data(cpt_record)
    assert "NaN" not in text
    parsed = json.loads(text)
    assert parsed["cptMetadata"]["finalDepth"] is None
    assert parsed["measurements"][0]["coneResistance"] is None
    # the record itself is left untouched
    assert cpt_record["data"][0]["coneResistance"] != cpt_record["data"][0]["coneResistance"]


def test_dumps_geojson_writes_nan_properties_as_null(cpt_record):
    cpt_record["final_depth"] = float("nan")
    text = export.dumps_geojson({"a.xml": cpt_record})
    assert "NaN" not in text
    assert json.loads(text)["features"][0]["properties"]["finalDepth"] is None


# ---------------------------------------------------------------------------
# GeoJSON
# ---------------------------------------------------------------------------

def test_geojson_skips_records_without_location(cpt_record, bhrg_record):
    no_location = {"meta": {"dataType": "BHR-GT"}, "data": []}
    bad_location = {"meta": {"dataType": "CPT"}, "delivered_location": {"epsg": "EPSG:0", "x": 1.0, "y": 1.0}}
    collection = export.create_geojson({
        "a.xml": cpt_record,
        "b.xml": bhrg_record,
        "c.xml": no_location,
        "d.xml": bad_location,
    })
    assert collection["type"] == "FeatureCollection"
    assert [f["properties"]["filename"] for f in collection["features"]] == ["a.xml", "b.xml"]


def test_geojson_feature_contents(cpt_record, bhrg_record):
    features = export.create_geojson({"a.xml": cpt_record, "b.xml": bhrg_record})["features"]
    cpt_feature, bhrg_feature = features

    assert cpt_feature["geometry"]["type"] == "Point"
    lon, lat = cpt_feature["geometry"]["coordinates"]
    assert lon == pytest.approx(5.387, abs=1e-2)
    assert lat == pytest.approx(52.155, abs=1e-2)
    props = cpt_feature["properties"]
    assert props["fileType"] == "CPT"
    assert props["finalDepth"] == 20.5
    assert props["reportDate"] == "2021-03-04"
    assert props["easting"] == 155000.0

    assert bhrg_feature["geometry"]["coordinates"] == [4.89, 52.37]
    assert bhrg_feature["properties"]["finalDepth"] == 5.0
    assert bhrg_feature["properties"]["coordinateSystem"] == "EPSG:4258"


def test_dumps_geojson_is_valid_json(cpt_record):
    parsed = json.loads(export.dumps_geojson({"a.xml": cpt_record}))
    assert len(parsed["features"]) == 1


def test_to_geodataframe(cpt_record, bhrg_record):
    gdf = export.to_geodataframe({"a.xml": cpt_record, "b.xml": bhrg_record})
    assert len(gdf) == 2
    assert gdf.crs.to_epsg() == 4326
    assert list(gdf["broId"]) == ["CPT000000012345", "BHR000000111111"]
    assert export.to_geodataframe({}).empty
