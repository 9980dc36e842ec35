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

"""Laboratory analysis helpers for BHR-GT investigated intervals.

Determinations are grouped into a fixed, ordered set of test categories. The
order drives legend entries and the lane layout next to the bore log, so the
table below must not be reordered.
"""

# category -> (legend colour, determination fields)
LAB_TEST_CATEGORIES = {
    "basic": (
        "#2563eb",
        (
            "waterContentDetermination",
            "volumetricMassDensityDetermination",
            "organicMatterContentDetermination",
            "carbonateContentDetermination",
            "volumetricMassDensityOfSolidsDetermination",
        ),
    ),
    "particleSize": ("#eab308", ("particleSizeDistributionDetermination",)),
    "atterberg": ("#dc2626", ("consistencyLimitsDetermination",)),
    "settlement": ("#16a34a", ("settlementCharacteristicsDetermination",)),
    "triaxial": ("#9333ea", ("shearStressChangeDuringLoadingDetermination",)),
    "permeability": ("#0891b2", ("saturatedPermeabilityDetermination",)),
    "undrainedShearStrength": ("#ea580c", ("maximumUndrainedShearStrengthDetermination",)),
    "directShear": ("#d946ef", ("shearStressChangeDuringHorizontalDeformationDetermination",)),
}

CATEGORY_ORDER = tuple(LAB_TEST_CATEGORIES)

DETERMINATION_TYPES = {
    "waterContentDetermination": "Water Content",
    "organicMatterContentDetermination": "Organic Matter",
    "carbonateContentDetermination": "Carbonate",
    "volumetricMassDensityDetermination": "Density",
    "volumetricMassDensityOfSolidsDetermination": "Density of Solids",
    "particleSizeDistributionDetermination": "Particle Size",
    "consistencyLimitsDetermination": "Atterberg Limits",
    "settlementCharacteristicsDetermination": "Settlement",
    "saturatedPermeabilityDetermination": "Permeability",
    "shearStressChangeDuringLoadingDetermination": "Triaxial",
    "maximumUndrainedShearStrengthDetermination": "Undrained Shear Strength",
    "shearStressChangeDuringHorizontalDeformationDetermination": "Direct Shear",
}


def category_color(category):
    return LAB_TEST_CATEGORIES[category][0]


def has_determination(interval, field):
    """Lists count when non-empty, anything else when not None."""
    value = interval.get(field)
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return value is not None


def get_lab_test_categories(interval):
    """Categories present in one investigated interval, in table order."""
    return [
        category
        for category, (_, fields) in LAB_TEST_CATEGORIES.items()
        if any(has_determination(interval, field) for field in fields)
    ]


def get_determination_types(interval):
    return [label for field, label in DETERMINATION_TYPES.items() if has_determination(interval, field)]


def get_unique_determination_types(intervals):
    seen = {}
    for interval in intervals:
        for label in get_determination_types(interval):
            seen.setdefault(label, None)
    return list(seen)


def get_sample_lines(analysis):
    """One entry per (interval, category) pair, used for the lab lanes of a bore log."""
    if not analysis:
        return []
    lines = []
    for idx, interval in enumerate(analysis.get("investigatedIntervals") or []):
        for category in get_lab_test_categories(interval):
            lines.append({
                "beginDepth": interval.get("beginDepth"),
                "endDepth": interval.get("endDepth"),
                "category": category,
                "intervalIndex": idx,
            })
    return lines


def get_legend_categories(sample_lines):
    present = {line["category"] for line in sample_lines}
    return [category for category in CATEGORY_ORDER if category in present]


# Upper sieve size (μm) of each particle size fraction, fine to coarse
PARTICLE_SIZE_FRACTIONS = (
    (2, "fraction0to2um"),
    (4, "fraction2to4um"),
    (8, "fraction4to8um"),
    (16, "fraction8to16um"),
    (32, "fraction16to32um"),
    (50, "fraction32to50um"),
    (63, "fraction50to63um"),
    (90, "fraction63to90um"),
    (125, "fraction90to125um"),
    (180, "fraction125to180um"),
    (250, "fraction180to250um"),
    (355, "fraction250to355um"),
    (500, "fraction355to500um"),
    (710, "fraction500to710um"),
    (1000, "fraction710to1000um"),
    (1400, "fraction1000to1400um"),
    (2000, "fraction1400umto2mm"),
    (4000, "fraction2to4mm"),
    (8000, "fraction4to8mm"),
    (16000, "fraction8to16mm"),
    (31500, "fraction16to31_5mm"),
    (63000, "fraction31_5to63mm"),
)

FINES_LIMIT_UM = 63
COARSEST_SIZE_UM = 63000


def particle_size_curve(determination):
    """Cumulative grain size curve as [(size_um, passing_pct), ...].

    Detailed fractions are summed fine to coarse, skipping absent ones. Without
    any detailed fraction the curve falls back to the <63 μm / >63 μm split.
    """
    if not isinstance(determination, dict):
        return []
    curve = []
    cumulative = 0
    for size, field in PARTICLE_SIZE_FRACTIONS:
        value = determination.get(field)
        if value is not None:
            cumulative += value
            curve.append((size, cumulative))
    if curve:
        return curve

    if determination.get("fractionSmaller63um") is not None:
        curve.append((FINES_LIMIT_UM, determination["fractionSmaller63um"]))
    if determination.get("fractionLarger63um") is not None:
        curve.append((COARSEST_SIZE_UM, 100))
    return curve


# key -> (determination, value field, label key, unit, default axis range)
BASIC_DETERMINATIONS = {
    "waterContent": ("waterContentDetermination", "waterContent", "waterContent", "%", (0, 100)),
    "volumetricMassDensity": (
        "volumetricMassDensityDetermination", "volumetricMassDensity", "bulkDensity", "g/cm³", (1, 2.5),
    ),
    "organicMatterContent": (
        "organicMatterContentDetermination", "organicMatterContent", "organicMatterContent", "%", (0, 100),
    ),
    "carbonateContent": ("carbonateContentDetermination", "carbonateContent", "carbonateContent", "%", (0, 50)),
    "volumetricMassDensityOfSolids": (
        "volumetricMassDensityOfSolidsDetermination", "volumetricMassDensityOfSolids", "particleDensity",
        "g/cm³", (2, 3),
    ),
    "maximumUndrainedShearStrength": (
        "maximumUndrainedShearStrengthDetermination", "maximumUndrainedShearStrength", "undrainedShearStrength",
        "kPa", (0, 200),
    ),
}


def basic_determination_value(interval, key):
    determination, field = BASIC_DETERMINATIONS[key][:2]
    found = interval.get(determination)
    return found.get(field) if isinstance(found, dict) else None


def get_available_basic_determinations(intervals):
    """Basic determination keys with a value on at least one interval, in table order."""
    return [
        key for key in BASIC_DETERMINATIONS
        if any(basic_determination_value(interval, key) is not None for interval in intervals)
    ]


def basic_determination_range(values, default_range):
    """Default axis range, stretched to 110% of the largest value when that exceeds it."""
    low, high = default_range
    top = max(values) if values else high
    return (low, top * 1.1) if top > high else (low, high)
