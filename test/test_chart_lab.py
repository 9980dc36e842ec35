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

import pytest

from broviewer.survey import chart, lab


# ---------------------------------------------------------------------------
# Chart axes
# ---------------------------------------------------------------------------

def _cpt(rows):
    return {"meta": {"dataType": "CPT"}, "data": rows}


def test_default_axes(cpt_record):
    axes = chart.detect_chart_axes(cpt_record)
    assert axes["y_axis"].key == "penetrationLength"
    assert axes["y_axis"].unit == "m"
    assert axes["x_axis"].key == "coneResistance"
    assert [col.key for col in axes["available_columns"]] == ["coneResistance", "localFriction", "frictionRatio"]
    assert [col.key for col in axes["y_axis_options"]] == ["penetrationLength", "depth"]


def test_axes_fall_back_along_preference_chain():
    axes = chart.detect_chart_axes(_cpt([{"depth": 0.1, "frictionRatio": 1.0, "temperature": 11.0}]))
    assert axes["y_axis"].key == "depth"
    assert axes["x_axis"].key == "frictionRatio"


def test_x_axis_prefers_corrected_cone_resistance_over_friction_ratio():
    axes = chart.detect_chart_axes(_cpt([
        {"penetrationLength": 0.1, "correctedConeResistance": 1.2, "frictionRatio": 1.0},
    ]))
    assert axes["y_axis"].key == "penetrationLength"
    assert axes["x_axis"].key == "correctedConeResistance"


def test_x_axis_falls_back_to_first_plottable_column():
    axes = chart.detect_chart_axes(_cpt([{"elapsedTime": 3.0, "temperature": 11.0, "localFriction": 0.02}]))
    assert axes["y_axis"] is None
    assert axes["x_axis"].key == "localFriction"
    assert "elapsedTime" not in [col.key for col in axes["available_columns"]]


def test_no_rows_gives_no_axes():
    axes = chart.detect_chart_axes(_cpt([]))
    assert axes["x_axis"] is None
    assert axes["y_axis"] is None
    assert axes["available_columns"] == []


def test_columns_come_from_first_row_only():
    rows = [{"penetrationLength": 0.1, "coneResistance": None}, {"penetrationLength": 0.2, "porePressureU2": 0.1}]
    keys = [col.key for col in chart.get_available_columns(rows)]
    assert keys == ["penetrationLength", "coneResistance"]


def test_unknown_chart_column():
    assert chart.get_chart_column("nope") is None
    assert chart.get_chart_column("frictionRatio").unit == "%"


# ---------------------------------------------------------------------------
# Lab test categories
# ---------------------------------------------------------------------------

def test_particle_size_list_marks_category():
    interval = {"particleSizeDistributionDetermination": [{"fraction": "clay"}]}
    assert lab.get_lab_test_categories(interval) == ["particleSize"]


def test_empty_determination_list_is_absent():
    assert lab.get_lab_test_categories({"particleSizeDistributionDetermination": []}) == []
    assert lab.get_lab_test_categories({}) == []


def test_categories_keep_table_order():
    interval = {
        "saturatedPermeabilityDetermination": {"k": 1e-9},
        "waterContentDetermination": {"waterContent": 10.0},
    }
    assert lab.get_lab_test_categories(interval) == ["basic", "permeability"]


def test_sample_lines(bhrgt_record):
    lines = lab.get_sample_lines(bhrgt_record["analysis"])
    assert [(line["category"], line["intervalIndex"]) for line in lines] == [
        ("basic", 0),
        ("particleSize", 0),
        ("atterberg", 1),
    ]
    assert lines[2]["beginDepth"] == 4.0
    assert lines[2]["endDepth"] == 4.4
    assert lab.get_sample_lines(None) == []


def test_legend_and_determination_types(bhrgt_record):
    intervals = bhrgt_record["analysis"]["investigatedIntervals"]
    lines = lab.get_sample_lines(bhrgt_record["analysis"])
    assert lab.get_legend_categories(lines) == ["basic", "particleSize", "atterberg"]
    assert lab.get_unique_determination_types(intervals) == ["Water Content", "Particle Size", "Atterberg Limits"]
    assert lab.category_color("atterberg") == "#dc2626"


# ---------------------------------------------------------------------------
# Particle size curve and basic determinations
# ---------------------------------------------------------------------------

def test_particle_size_curve_accumulates_present_fractions(bhrgt_record):
    determination = bhrgt_record["analysis"]["investigatedIntervals"][0]["particleSizeDistributionDetermination"]
    assert lab.particle_size_curve(determination) == [(2, 10.0), (4, 15.0), (90, 40.0), (125, 100.0)]


def test_particle_size_curve_coarse_fractions():
    curve = lab.particle_size_curve({"fraction8to16mm": 20.0, "fraction16to31_5mm": 30.0, "fraction31_5to63mm": 50.0})
    assert curve == [(16000, 20.0), (31500, 50.0), (63000, 100.0)]


def test_particle_size_curve_falls_back_to_63um_split():
    curve = lab.particle_size_curve({"fractionSmaller63um": 35.0, "fractionLarger63um": 65.0})
    assert curve == [(63, 35.0), (63000, 100)]
    assert lab.particle_size_curve({"fractionSmaller63um": 35.0}) == [(63, 35.0)]
    assert lab.particle_size_curve({}) == []
    assert lab.particle_size_curve([{"fraction": "sand"}]) == []
    assert lab.particle_size_curve(None) == []


def test_basic_determinations(bhrgt_record):
    intervals = bhrgt_record["analysis"]["investigatedIntervals"]
    assert lab.get_available_basic_determinations(intervals) == ["waterContent"]
    assert lab.basic_determination_value(intervals[0], "waterContent") == 23.5
    assert lab.basic_determination_value(intervals[1], "waterContent") is None
    assert lab.basic_determination_value({"carbonateContentDetermination": [1.0]}, "carbonateContent") is None


def test_basic_determination_range():
    assert lab.basic_determination_range([40.0, 80.0], (0, 100)) == (0, 100)
    low, high = lab.basic_determination_range([40.0, 150.0], (0, 100))
    assert low == 0
    assert high == pytest.approx(165.0)
    assert lab.basic_determination_range([], (2, 3)) == (2, 3)
