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

"""CPT, dissipation test, bore log and laboratory figures (Plotly).

CPT measurements plot as lines against penetration length or depth. Borehole
layers render as banded rectangles, with one narrow lane per laboratory test
category to the right of the log for BHR-GT records. Depth plots keep depth
increasing downward.
"""

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from broviewer.datamodel import (
    BHR_GT,
    LOWER_BOUNDARY,
    UPPER_BOUNDARY,
    get_rows,
    require_data_type,
)
from broviewer.i18n import get_translator
from broviewer.survey.chart import detect_chart_axes, get_chart_column
from broviewer.survey.lab import (
    BASIC_DETERMINATIONS,
    CATEGORY_ORDER,
    basic_determination_range,
    basic_determination_value,
    category_color,
    get_available_basic_determinations,
    get_legend_categories,
    get_sample_lines,
    particle_size_curve,
)

MIN_LAYER_HEIGHT_PX = 15
DEFAULT_LAYER_COLOR = "#b0b0b0"
MAX_LABEL_LENGTH = 15

# Lab lanes sit right of the log (x in [0, 1]): one band per category,
# 0.053 wide each, 6% inner padding.
LAB_LANE_START = 1.01
LAB_LANE_WIDTH = 0.053
LAB_LANE_PADDING = 0.06

TRACK_COLORS = ["#8b1e3f", "#2563eb", "#16a34a", "#f59e0b", "#7c3aed", "#0ea5e9", "#ef4444"]

LAYER_PALETTE = [
    "#1f77b4",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
]


def measurements_frame(record):
    """CPT measurement rows as a DataFrame (one column per measurement field)."""
    rows = get_rows(record)
    if not rows:
        return pd.DataFrame()
    return pd.DataFrame.from_records(rows)


def _axis_title(key):
    col = get_chart_column(key)
    if col is None:
        return key
    return f"{col.name} ({col.unit})"


def _cpt_trace(df, x_key, y_key, color):
    subset = df[[x_key, y_key]].dropna()
    return go.Scatter(
        x=subset[x_key],
        y=subset[y_key],
        mode="lines",
        line=dict(color=color, width=1.5),
        name=x_key,
        hovertemplate=f"{x_key}: %{{x}}<br>{y_key}: %{{y}}<extra></extra>",
    )


def plot_cpt(record, x_key=None, y_key=None, color="#8b1e3f", height=600):
    """Plot one CPT measurement against depth.

    Axes default to `detect_chart_axes`. Returns an empty figure when the record
    has no plottable columns.
    """
    axes = detect_chart_axes(record)
    x_key = x_key or (axes["x_axis"].key if axes["x_axis"] else None)
    y_key = y_key or (axes["y_axis"].key if axes["y_axis"] else None)
    df = measurements_frame(record)
    if x_key is None or y_key is None or x_key not in df.columns or y_key not in df.columns:
        return go.Figure()

    layout = go.Layout(
        height=height,
        margin=dict(l=50, r=10, t=10, b=40),
        xaxis=dict(title=_axis_title(x_key), side="top", zeroline=False),
        yaxis=dict(title=_axis_title(y_key), autorange="reversed", zeroline=False),
        showlegend=False,
    )
    return go.Figure(data=[_cpt_trace(df, x_key, y_key, color)], layout=layout)


def plot_cpt_tracks(record, x_keys=None, y_key=None, colors=None, height=600, width_per=220):
    """Plot several CPT measurements side-by-side with a shared depth axis.

    `x_keys` defaults to every plottable column of the record.
    """
    axes = detect_chart_axes(record)
    y_key = y_key or (axes["y_axis"].key if axes["y_axis"] else None)
    if x_keys is None:
        x_keys = [col.key for col in axes["available_columns"]]
    df = measurements_frame(record)
    x_keys = [key for key in x_keys if key in df.columns]
    if y_key is None or y_key not in df.columns or not x_keys:
        return go.Figure()
    colors = colors or TRACK_COLORS

    fig = make_subplots(rows=1, cols=len(x_keys), shared_yaxes=True, horizontal_spacing=0.02)
    for idx, key in enumerate(x_keys):
        fig.add_trace(_cpt_trace(df, key, y_key, colors[idx % len(colors)]), row=1, col=idx + 1)
        fig.update_xaxes(title_text=_axis_title(key), row=1, col=idx + 1)

    fig.update_yaxes(title_text=_axis_title(y_key), autorange="reversed", row=1, col=1)
    fig.update_layout(height=height, width=width_per * len(x_keys), showlegend=False, margin=dict(l=40, r=10, t=10, b=40))
    return fig


def pixels_per_meter(plot_height, min_depth, max_depth):
    return plot_height / (max_depth - min_depth)


def filter_layers_by_pixel_height(layers, plot_height, min_depth, max_depth, min_height_px=MIN_LAYER_HEIGHT_PX):
    """Layers tall enough on screen to carry a label."""
    scale = pixels_per_meter(plot_height, min_depth, max_depth)
    return [
        layer for layer in layers
        if (layer[LOWER_BOUNDARY] - layer[UPPER_BOUNDARY]) * scale >= min_height_px
    ]


def lab_lane_positions(categories=CATEGORY_ORDER):
    """x0/x1 of the lab lane for each category, spread over the lane strip like a band scale."""
    n = len(categories)
    step = (n * LAB_LANE_WIDTH) / (n - LAB_LANE_PADDING)
    bandwidth = step * (1 - LAB_LANE_PADDING)
    return {
        category: (LAB_LANE_START + idx * step, LAB_LANE_START + idx * step + bandwidth)
        for idx, category in enumerate(categories)
    }


def _soil_name(layer, dtype):
    key = "geotechnicalSoilName" if dtype == BHR_GT else "soilNameNEN5104"
    return str(layer.get(key) or "")


def _short_label(name):
    return name if len(name) <= MAX_LABEL_LENGTH else name[:12] + "..."


def _layer_title(layer, name, t):
    parts = [f"{layer[UPPER_BOUNDARY]:.2f} – {layer[LOWER_BOUNDARY]:.2f} m", name]
    for key, label in (
        ("color", "layerColor"),
        ("organicMatterContentClass", "organicMatter"),
        ("sandMedianClass", "sandMedian"),
    ):
        if layer.get(key):
            parts.append(f"{t(label)}: {layer[key]}")
    for key in ("dispersedInhomogeneity", "anthropogenic", "rooted"):
        if layer.get(key) is not None:
            parts.append(f"{t(key)}: {t('yes') if layer[key] else t('no')}")
    return "<br>".join(parts)


def plot_bore_log(record, t=None, palette=None, height=800, width=350, min_layer_height_px=MIN_LAYER_HEIGHT_PX):
    """Bore log for a BHR-G or BHR-GT record.

    Each soil name gets a palette colour (layers without a name are grey).
    Labels are drawn only on layers at least `min_layer_height_px` tall.
    BHR-GT laboratory intervals add one lane per test category.
    """
    t = t or get_translator()
    dtype = require_data_type(record)
    layers = [
        layer for layer in get_rows(record)
        if layer.get(UPPER_BOUNDARY) is not None and layer.get(LOWER_BOUNDARY) is not None
    ]
    if not layers:
        return go.Figure()
    palette = palette or LAYER_PALETTE

    min_depth = float(np.nanmin([layer[UPPER_BOUNDARY] for layer in layers]))
    max_depth = float(np.nanmax([layer[LOWER_BOUNDARY] for layer in layers]))
    plot_height = height - 70
    labelled = (
        filter_layers_by_pixel_height(layers, plot_height, min_depth, max_depth, min_layer_height_px)
        if max_depth > min_depth else []
    )

    colors = {}
    shapes = []
    hover_y, hover_text = [], []
    for layer in layers:
        name = _soil_name(layer, dtype)
        if name:
            fill = colors.setdefault(name, palette[len(colors) % len(palette)])
        else:
            fill = DEFAULT_LAYER_COLOR
        y0, y1 = layer[UPPER_BOUNDARY], layer[LOWER_BOUNDARY]
        shapes.append(dict(type="rect", xref="x", yref="y", x0=0, x1=1, y0=y0, y1=y1,
                           fillcolor=fill, line=dict(color="white", width=0.5)))
        hover_y.append(0.5 * (y0 + y1))
        hover_text.append(_layer_title(layer, name, t))

    data = [
        go.Scatter(
            x=[0.5] * len(hover_y),
            y=hover_y,
            mode="markers",
            marker=dict(size=1, color="rgba(0,0,0,0)"),
            hovertext=hover_text,
            hoverinfo="text",
            showlegend=False,
        ),
        go.Scatter(
            x=[0.5] * len(labelled),
            y=[0.5 * (layer[UPPER_BOUNDARY] + layer[LOWER_BOUNDARY]) for layer in labelled],
            mode="text",
            text=[_short_label(_soil_name(layer, dtype)) for layer in labelled],
            textposition="middle center",
            textfont=dict(size=9, color="black"),
            hoverinfo="skip",
            showlegend=False,
        ),
    ]

    x_max = 1.0
    sample_lines = get_sample_lines(record.get("analysis")) if dtype == BHR_GT else []
    if sample_lines:
        lanes = lab_lane_positions()
        for line in sample_lines:
            x0, x1 = lanes[line["category"]]
            shapes.append(dict(type="rect", xref="x", yref="y", x0=x0, x1=x1,
                               y0=line["beginDepth"], y1=line["endDepth"],
                               fillcolor=category_color(line["category"]), line=dict(color="white", width=0.5)))
        x_max = max(x1 for _, x1 in lanes.values())
        # legend entries, one per category present
        for category in get_legend_categories(sample_lines):
            data.append(go.Scatter(
                x=[None], y=[None], mode="markers",
                marker=dict(size=10, symbol="square", color=category_color(category)),
                name=t(f"labTestType.{category}"),
                showlegend=True,
            ))

    fig = go.Figure(data=data)
    fig.update_layout(
        height=height,
        width=width,
        title=dict(text=t("boreLog")),
        margin=dict(l=50, r=10, t=30, b=20),
        xaxis=dict(range=[0, x_max], visible=False, fixedrange=True),
        yaxis=dict(title=t("depthAxis"), autorange="reversed", showgrid=True),
        shapes=shapes,
        showlegend=bool(sample_lines),
        legend=dict(title=dict(text=t("labTestSamples") if sample_lines else "")),
    )
    return fig


# ---------------------------------------------------------------------------
# Dissipation tests
# ---------------------------------------------------------------------------

PORE_PRESSURE_SERIES = (
    ("porePressureU1", "U1"),
    ("porePressureU2", "U2"),
    ("porePressureU3", "U3"),
)
TIME_SCALES = ("linear", "log", "sqrt")
DISSIPATION_TESTS = "dissipation_tests"


def get_available_series(measurements):
    """(key, label) of the pore pressure series with at least one value."""
    return [
        (key, label) for key, label in PORE_PRESSURE_SERIES
        if any(m.get(key) is not None for m in measurements)
    ]


def dissipation_frame(test, time_scale="log"):
    """Long-format pore pressures (elapsedTime, pressure, series) of one dissipation test.

    Log and sqrt time scales drop measurements at or before t = 0.
    """
    if time_scale not in TIME_SCALES:
        raise ValueError(f"Unknown time scale {time_scale!r}; expected one of {TIME_SCALES}")
    measurements = test.get("measurements") or []
    series = get_available_series(measurements)
    rows = []
    for m in measurements:
        elapsed = m.get("elapsedTime")
        if elapsed is None or (time_scale != "linear" and elapsed <= 0):
            continue
        for key, label in series:
            if m.get(key) is not None:
                rows.append({"elapsedTime": elapsed, "pressure": m[key], "series": label})
    return pd.DataFrame(rows, columns=["elapsedTime", "pressure", "series"])


def plot_dissipation_test(test, time_scale="log", t=None, width=640, height=400):
    """Pore pressure against elapsed time for one dissipation test.

    The sqrt scale plots against √t. A legend is shown only when more than one
    series has data.
    """
    t = t or get_translator()
    df = dissipation_frame(test, time_scale)
    if df.empty:
        return go.Figure()

    time_label = t("elapsedTimeSeconds")
    xaxis = dict(title=time_label, showgrid=True)
    if time_scale == "log":
        xaxis["type"] = "log"
    elif time_scale == "sqrt":
        xaxis["title"] = f"√ {time_label}"

    labels = list(dict.fromkeys(df["series"]))
    data = []
    for idx, label in enumerate(labels):
        subset = df[df["series"] == label]
        x = np.sqrt(subset["elapsedTime"]) if time_scale == "sqrt" else subset["elapsedTime"]
        data.append(go.Scatter(
            x=x,
            y=subset["pressure"],
            mode="lines",
            name=label,
            line=dict(color=TRACK_COLORS[idx % len(TRACK_COLORS)], width=1.5),
        ))

    layout = go.Layout(
        width=width,
        height=height,
        title=dict(text=t("dissipationTestAtDepth", depth=test.get("penetrationLength"))),
        margin=dict(l=60, r=40, t=40, b=40),
        xaxis=xaxis,
        yaxis=dict(title=f"{t('porePressure')} (MPa)", showgrid=True),
        showlegend=len(labels) > 1,
    )
    return go.Figure(data=data, layout=layout)


def plot_dissipation_tests(record, time_scale="log", t=None):
    """One figure per dissipation test of a CPT record."""
    return [
        plot_dissipation_test(test, time_scale=time_scale, t=t)
        for test in record.get(DISSIPATION_TESTS) or []
    ]


# ---------------------------------------------------------------------------
# Laboratory plots
# ---------------------------------------------------------------------------

# Clay/silt, sand and gravel boundaries (μm)
SOIL_CLASS_BOUNDARIES = (2, 63, 2000)
PSD_COLOR = "#2563eb"


def plot_particle_size_distribution(determination, t=None, width=600, height=400):
    """Cumulative grain size curve on a log size axis (1 μm to 100 mm)."""
    t = t or get_translator()
    curve = particle_size_curve(determination)
    if not curve:
        return go.Figure()
    sizes, passing = zip(*curve)

    data = [
        go.Scatter(
            x=[boundary, boundary], y=[0, 100], mode="lines",
            line=dict(color="#ddd", dash="dash", width=1),
            hoverinfo="skip", showlegend=False,
        )
        for boundary in SOIL_CLASS_BOUNDARIES
    ]
    data.append(go.Scatter(
        x=[10, 200, 10000], y=[95, 95, 95], mode="text",
        text=[t("clay"), t("sand"), t("gravel")],
        textfont=dict(size=10, color="gray"),
        hoverinfo="skip", showlegend=False,
    ))
    data.append(go.Scatter(
        x=list(sizes), y=list(passing), mode="lines+markers",
        line=dict(color=PSD_COLOR, width=2), marker=dict(size=4, color=PSD_COLOR),
        name=t("particleSizeDistribution"), showlegend=False,
    ))

    layout = go.Layout(
        width=width,
        height=height,
        title=dict(text=t("particleSizeDistribution")),
        margin=dict(l=60, r=20, t=40, b=40),
        xaxis=dict(type="log", range=[0, 5], title=t("particleSizeMicrometre"), showgrid=True),
        yaxis=dict(range=[0, 100], title=t("cumulativePassing"), showgrid=True),
    )
    return go.Figure(data=data, layout=layout)


def _intervals(record):
    analysis = record.get("analysis") or {}
    return analysis.get("investigatedIntervals") or []


def basic_determinations_frame(record):
    """Summary table: one row per interval with any basic determination, one column per determination."""
    intervals = _intervals(record)
    keys = get_available_basic_determinations(intervals)
    rows = []
    for interval in intervals:
        values = {key: basic_determination_value(interval, key) for key in keys}
        if any(value is not None for value in values.values()):
            rows.append({"beginDepth": interval.get("beginDepth"), "endDepth": interval.get("endDepth"), **values})
    return pd.DataFrame(rows, columns=["beginDepth", "endDepth"] + keys)


def plot_basic_determinations(record, t=None, height=400, first_width=200, other_width=160):
    """Basic determinations of a BHR-GT record against depth, one panel per determination with data."""
    t = t or get_translator()
    intervals = _intervals(record)
    keys = get_available_basic_determinations(intervals)
    if not keys:
        return go.Figure()
    max_depth = max((i["endDepth"] for i in intervals if i.get("endDepth") is not None), default=10)

    fig = make_subplots(rows=1, cols=len(keys), shared_yaxes=True, horizontal_spacing=0.02)
    for idx, key in enumerate(keys):
        _, _, label_key, unit, default_range = BASIC_DETERMINATIONS[key]
        label = t(label_key)
        points = [
            i for i in intervals
            if basic_determination_value(i, key) is not None
            and i.get("beginDepth") is not None and i.get("endDepth") is not None
        ]
        values = [basic_determination_value(i, key) for i in points]
        fig.add_trace(go.Scatter(
            x=values,
            y=[0.5 * (i["beginDepth"] + i["endDepth"]) for i in points],
            mode="markers",
            marker=dict(symbol="x-thin", size=9, line=dict(color=PSD_COLOR, width=2)),
            hovertext=[
                f"{i['beginDepth']:.2f} – {i['endDepth']:.2f} m<br>{label}: {v:.2f} {unit}"
                for i, v in zip(points, values)
            ],
            hoverinfo="text",
            name=label,
        ), row=1, col=idx + 1)
        fig.update_xaxes(
            title_text=f"{label} ({unit})",
            range=list(basic_determination_range(values, default_range)),
            showgrid=True,
            row=1, col=idx + 1,
        )

    fig.update_yaxes(title_text=t("depthAxis"), range=[max_depth, 0], row=1, col=1)
    fig.update_layout(
        height=height,
        width=first_width + other_width * (len(keys) - 1),
        title=dict(text=t("depthProfiles")),
        showlegend=False,
        margin=dict(l=50, r=5, t=30, b=40),
    )
    return fig
