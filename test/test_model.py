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

import folium
import pytest

from broviewer.datamodel import UnknownDataTypeError
from broviewer.map import NL_BOUNDS
from broviewer.model import BroDataset, ConfigError, ViewerConfig, sort_file_rows


@pytest.fixture
def dataset(cpt_record, bhrg_record, bhrgt_record):
    return BroDataset(records={"c.xml": bhrgt_record, "a.xml": cpt_record, "b.xml": bhrg_record})


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def test_config_defaults():
    config = ViewerConfig()
    assert config.locale == "en"
    assert config.map_bounds == NL_BOUNDS
    assert config.to_dict()["plot_height"] == 800


def test_config_from_env():
    config = ViewerConfig.from_env({"BROVIEWER_LOCALE": "nl", "BROVIEWER_PLOT_HEIGHT": "600"})
    assert config.locale == "nl"
    assert config.plot_height == 600


@pytest.mark.parametrize("environ", [
    {"BROVIEWER_LOCALE": "de"},
    {"BROVIEWER_PLOT_HEIGHT": "0"},
])
def test_config_from_env_rejects_invalid_values(environ):
    with pytest.raises(ConfigError) as excinfo:
        ViewerConfig.from_env(environ)
    assert isinstance(excinfo.value, ValueError)


def test_config_from_env_rejects_unparsable_numbers():
    with pytest.raises(ValueError):
        ViewerConfig.from_env({"BROVIEWER_PLOT_HEIGHT": "tall"})


def test_config_update_validates():
    config = ViewerConfig()
    assert config.update(locale="nl").locale == "nl"
    with pytest.raises(ConfigError):
        config.update(map_bounds=(54.0, 50.0, 3.0, 8.0))


# ---------------------------------------------------------------------------
# Dataset
# ---------------------------------------------------------------------------

def test_add_rejects_unknown_type():
    with pytest.raises(UnknownDataTypeError):
        BroDataset().add("x.xml", {"meta": {"dataType": "GLD"}})


def test_filenames_select_remove(dataset):
    assert dataset.filenames() == ["c.xml", "a.xml", "b.xml"]
    assert dataset.select(["a.xml", "missing.xml"]).filenames() == ["a.xml"]
    assert dataset.remove("c.xml").filenames() == ["a.xml", "b.xml"]
    assert dataset.copy().filenames() == ["a.xml", "b.xml"]


def test_file_rows_content(dataset):
    rows = {row["id"]: row for row in dataset.file_rows()}
    assert rows["a.xml"] == {
        "id": "a.xml",
        "filename": "a.xml",
        "reportDate": "2021-03-04",
        "type": "CPT",
        "finalDepth": 20.5,
        "qualityRegime": "IMBRO",
    }
    assert rows["b.xml"]["qualityRegime"] == "IMBRO/A"
    assert rows["b.xml"]["finalDepth"] == 5.0
    assert rows["c.xml"]["reportDate"] is None


def test_file_rows_sorting(dataset):
    def order(**kwargs):
        return [row["filename"] for row in dataset.file_rows(**kwargs)]

    assert order() == ["a.xml", "b.xml", "c.xml"]
    assert order(descending=True) == ["c.xml", "b.xml", "a.xml"]
    assert order(sort_by="finalDepth") == ["b.xml", "c.xml", "a.xml"]
    assert order(sort_by="finalDepth", descending=True) == ["a.xml", "c.xml", "b.xml"]
    # a missing report date stays last in both directions
    assert order(sort_by="reportDate") == ["b.xml", "a.xml", "c.xml"]
    assert order(sort_by="reportDate", descending=True) == ["a.xml", "b.xml", "c.xml"]
    with pytest.raises(ValueError):
        dataset.file_rows(sort_by="colour")


def test_sort_file_rows_numbers_compare_numerically():
    rows = [{"finalDepth": 10.0}, {"finalDepth": 9.5}, {"finalDepth": None}, {"finalDepth": 100}]
    assert [row["finalDepth"] for row in sort_file_rows(rows, "finalDepth")] == [9.5, 10.0, 100, None]


def test_dataset_exports(dataset):
    assert len(dataset.to_geojson()["features"]) == 3
    assert len(dataset.to_geodataframe()) == 3
    assert dataset.to_csv("a.xml").startswith("penetrationLength,depth")
    assert '"dataType": "BHR-G"' in dataset.to_json("b.xml")


def test_dataset_headers_follow_locale(cpt_record):
    dataset = BroDataset(config=ViewerConfig(locale="nl"), records={"a.xml": cpt_record})
    assert dataset.header_sections("a.xml")[0]["title"] == "Onderzoeksgegevens"
    assert dataset.summary_items("a.xml")[0] == {"label": "Bestandsnaam", "value": "a.xml"}


def test_dataset_plots_and_map(dataset):
    assert len(dataset.survey_plot("a.xml").data) == 1
    assert len(dataset.survey_plot("c.xml").layout.shapes) == 5
    assert isinstance(dataset.survey_map(selected="a.xml"), folium.Map)
