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

"""Header sections for BRO survey records.

Each survey type has an ordered list of sections, each section an ordered list
of field descriptors. A descriptor names the record field (dotted paths reach
into nested mappings), the label key, the presence rule and the formatter, so
the rule deciding whether a field shows up lives in exactly one place.

Sections are returned as dicts:

    {"id": "survey", "title": "...", "items": [{"label": "...", "value": ...}, ...]}

Sections without items are dropped.
"""

from broviewer.crs import get_coord_system_name, normalize_epsg, to_wgs84
from broviewer.datamodel import (
    BHR_G,
    BHR_GT,
    BRO_ID,
    CPT,
    DELIVERED_LOCATION,
    EPSG,
    GROUNDWATER_LEVEL,
    LOWER_BOUNDARY,
    PENETRATION_LENGTH,
    QUALITY_REGIME,
    REPORT_DATE,
    STANDARDIZED_LOCATION,
    UPPER_BOUNDARY,
    VERTICAL_DATUM,
    VERTICAL_OFFSET,
    VERTICAL_REFERENCE_POINT,
    X,
    Y,
    get_final_depth,
    get_rows,
    require_data_type,
)
from broviewer.format import (
    format_date,
    format_delivered_location,
    format_number,
    format_standardized_location,
)
from broviewer.i18n import get_translator
from broviewer.survey.lab import get_unique_determination_types

MAX_SOIL_NAMES = 5


# Presence rules

def is_not_null(value):
    return value is not None


def is_truthy(value):
    return bool(value)


def is_non_empty(value):
    return isinstance(value, (list, tuple)) and len(value) > 0


# Formatters take (value, t)

def as_text(value, t):
    return value


def as_meters(value, t):
    return f"{value:.2f} m"


def as_yes_no(value, t):
    return t("yes") if value else t("no")


def as_date(value, t):
    return format_date(value)


def as_count(value, t):
    return len(value)


def as_upper(value, t):
    return str(value).upper()


def with_unit(unit, sep=" "):
    def fmt(value, t):
        return f"{format_number(value)}{sep}{unit}"
    return fmt


def fixed(decimals, unit=None):
    def fmt(value, t):
        text = f"{value:.{decimals}f}"
        return f"{text} {unit}" if unit else text
    return fmt


def resolve(record, path):
    value = record
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class HeaderField:
    """One candidate header row: where to read it, when to show it and how to render it."""

    def __init__(self, key, label, present=is_not_null, fmt=as_text):
        self.key = key
        self.label = label
        self.present = present
        self.fmt = fmt

    def item(self, record, t):
        value = resolve(record, self.key)
        if not self.present(value):
            return None
        return {"label": t(self.label), "value": self.fmt(value, t)}


def _text(key, label):
    return HeaderField(key, label, is_truthy, as_text)


def _flag(key, label):
    return HeaderField(key, label, is_not_null, as_yes_no)


def _meters(key, label):
    return HeaderField(key, label, is_not_null, as_meters)


def _date(key, label):
    return HeaderField(key, label, is_truthy, as_date)


def _count(key, label):
    return HeaderField(key, label, is_non_empty, as_count)


def build_items(record, fields, t):
    items = []
    for field in fields:
        item = field.item(record, t)
        if item is not None:
            items.append(item)
    return items


LOCATION_FIELDS = (
    HeaderField(DELIVERED_LOCATION, "deliveredLocation", is_truthy, lambda v, t: format_delivered_location(v)),
    HeaderField(STANDARDIZED_LOCATION, "standardizedLocation", is_truthy, lambda v, t: format_standardized_location(v)),
    _meters(VERTICAL_OFFSET, "verticalOffset"),
    HeaderField(VERTICAL_DATUM, "verticalDatum", is_truthy, as_upper),
    _text(VERTICAL_REFERENCE_POINT, "referencePoint"),
)

CPT_SURVEY_FIELDS = (
    _text("cpt_standard", "cptStandard"),
    _text("cpt_method", "cptMethod"),
    HeaderField("quality_class", "qualityClass"),
    _meters("predrilled_depth", "predrilledDepth"),
    _meters("final_depth", "finalDepth"),
    _meters(GROUNDWATER_LEVEL, "waterLevel"),
    _text("stop_criterion", "stopCriterion"),
    _flag("dissipationtest_performed", "dissipationTest"),
)

CPT_EQUIPMENT_FIELDS = (
    _text("cpt_description", "description"),
    _text("cpt_type", "cptType"),
    HeaderField("cone_surface_area", "coneSurfaceArea", fmt=with_unit("mm²")),
    HeaderField("cone_diameter", "coneDiameter", fmt=with_unit("mm")),
    HeaderField("cone_surface_quotient", "coneSurfaceQuotient", fmt=fixed(3)),
    HeaderField("cone_to_friction_sleeve_distance", "coneToFrictionSleeveDistance", fmt=with_unit("mm")),
    HeaderField("cone_to_friction_sleeve_surface_area", "frictionSleeveSurfaceArea", fmt=with_unit("mm²")),
    HeaderField("cone_to_friction_sleeve_surface_quotient", "frictionSleeveSurfaceQuotient", fmt=fixed(3)),
)

# (field suffix, label prefix, unit), each measured before and after the test
_ZERO_LOAD = (
    ("cone_resistance", "coneResistance", "MPa"),
    ("local_friction", "localFriction", "MPa"),
    ("pore_pressure_u1", "porePressureU1", "MPa"),
    ("pore_pressure_u2", "porePressureU2", "MPa"),
    ("pore_pressure_u3", "porePressureU3", "MPa"),
    ("inclination_ew", "inclinationEW", "°"),
    ("inclination_ns", "inclinationNS", "°"),
    ("inclination_resultant", "inclinationResultant", "°"),
)

CPT_ZERO_LOAD_FIELDS = tuple(
    HeaderField(f"zlm_{suffix}_{when}", f"{label}{when.capitalize()}", fmt=fixed(4, unit))
    for suffix, label, unit in _ZERO_LOAD
    for when in ("before", "after")
)

CPT_PROCESSING_FIELDS = (
    _date("final_processing_date", "finalProcessingDate"),
    _flag("signal_processing_performed", "signalProcessingPerformed"),
    _flag("interruption_processing_performed", "interruptionProcessingPerformed"),
    _flag("expert_correction_performed", "expertCorrectionPerformed"),
)

BHR_G_SURVEY_FIELDS = (
    _text("description_procedure", "descriptionProcedure"),
    _meters("final_bore_depth", "finalBoreDepth"),
    _meters("final_sample_depth", "finalSampleDepth"),
    _flag("bore_rock_reached", "rockReached"),
    _flag("bore_hole_completed", "boreholeCompleted"),
    _text("stop_criterion", "stopCriterion"),
    _text("nitg_code", "nitgCode"),
)

BHR_GT_SURVEY_FIELDS = (
    _text("description_procedure", "descriptionProcedure"),
    _meters("final_bore_depth", "finalBoreDepth"),
    _meters("final_sample_depth", "finalSampleDepth"),
    _meters(GROUNDWATER_LEVEL, "waterLevel"),
    _flag("bore_rock_reached", "rockReached"),
    _flag("bore_hole_completed", "boreholeCompleted"),
    _text("stop_criterion", "stopCriterion"),
)

BORING_FIELDS = (
    _date("boring_start_date", "boringStartDate"),
    _date("boring_end_date", "boringEndDate"),
    _text("boring_procedure", "boringProcedure"),
    _text("boring_technique", "boringTechnique"),
    _flag("trajectory_excavated", "trajectoryExcavated"),
    _flag("subsurface_contaminated", "subsurfaceContaminated"),
)

BHR_G_SAMPLING_FIELDS = (
    _text("sampling_procedure", "samplingProcedure"),
    _text("sampling_method", "samplingMethod"),
    _text("sampling_quality", "samplingQuality"),
    _flag("continuously_sampled", "continuouslySampled"),
)

BHR_GT_SAMPLING_FIELDS = (
    _text("sampler_type", "samplerType"),
    _text("sampling_procedure", "samplingProcedure"),
    _text("sampling_method", "samplingMethod"),
    _text("sampling_quality", "samplingQuality"),
    _flag("orientated_sampled", "orientatedSampled"),
    _flag("continuously_sampled", "continuouslySampled"),
    HeaderField("sample_container_diameter", "sampleContainerDiameter", fmt=with_unit("mm")),
    HeaderField("sample_container_length", "sampleContainerLength", fmt=with_unit("mm")),
    _flag("piston_present", "pistonPresent"),
    _flag("core_catcher_present", "coreCatcherPresent"),
    _flag("stocking_used", "stockingUsed"),
    _flag("lubrication_fluid_used", "lubricationFluidUsed"),
    _flag("right_angled_cutting_shoe", "rightAngledCuttingShoe"),
    HeaderField("cutting_shoe_inside_diameter", "cuttingShoeInsideDiameter", fmt=with_unit("mm")),
    HeaderField("cutting_shoe_outside_diameter", "cuttingShoeOutsideDiameter", fmt=with_unit("mm")),
    HeaderField("taper_angle", "taperAngle", fmt=with_unit("°", sep="")),
)

BHR_G_DESCRIPTION_FIELDS = (
    _text("description_quality", "descriptionQuality"),
    _text("described_samples_quality", "describedSamplesQuality"),
    _text("description_location", "descriptionLocation"),
    _date("description_report_date", "descriptionReportDate"),
    _text("described_material", "describedMaterial"),
    _text("sample_moistness", "sampleMoistness"),
)

BHR_GT_DESCRIPTION_FIELDS = (
    _text("description_quality", "descriptionQuality"),
    _text("description_location", "descriptionLocation"),
    _date("description_report_date", "descriptionReportDate"),
    _text("described_material", "describedMaterial"),
    _text("sample_moistness", "sampleMoistness"),
    _flag("borehole_log_checked", "boreholeLogChecked"),
)

BHR_G_CONTEXT_FIELDS = (
    _text("delivery_context", "deliveryContext"),
    _text("survey_purpose", "surveyPurpose"),
    _text("discipline", "discipline"),
    _text("survey_procedure", "surveyProcedure"),
)

BHR_GT_CONTEXT_FIELDS = BHR_G_CONTEXT_FIELDS + (
    _flag("site_characteristic_determined", "siteCharacteristicDetermined"),
)

BHR_G_INTERVAL_FIELDS = (
    _count("bored_intervals", "boredIntervals"),
    _count("sampled_intervals", "sampledIntervals"),
)

BHR_GT_INTERVAL_FIELDS = BHR_G_INTERVAL_FIELDS + (
    _count("completed_intervals", "completedIntervals"),
    _count("not_described_intervals", "notDescribedIntervals"),
)

REGISTRATION_FIELDS = (
    _text("registration_history.registrationStatus", "registrationStatus"),
    _date("registration_history.objectRegistrationTime", "registrationTime"),
    _date("registration_history.registrationCompletionTime", "registrationCompletionTime"),
    _flag("registration_history.corrected", "corrected"),
    _flag("registration_history.underReview", "underReview"),
    _date("report_history.reportStartDate", "reportStartDate"),
    _date("report_history.reportEndDate", "reportEndDate"),
)

# Columns summarised in the CPT measurement section
_SUMMARY_COLUMNS = (
    ("coneResistance", "Cone Resistance"),
    ("localFriction", "Local Friction"),
    ("frictionRatio", "Friction Ratio"),
    ("porePressureU2", "Pore Pressure U2"),
    ("inclinationResultant", "Inclination"),
)


def build_location_items(record, t):
    return build_items(record, LOCATION_FIELDS, t)


def build_measurement_items(record, t):
    rows = get_rows(record)
    items = [{"label": t("numberOfMeasurements"), "value": len(rows)}]
    if not rows:
        return items

    first, last = rows[0], rows[-1]
    items.append({
        "label": t("depthRange"),
        "value": f"{first[PENETRATION_LENGTH]:.2f} - {last[PENETRATION_LENGTH]:.2f} m",
    })
    names = [name for key, name in _SUMMARY_COLUMNS if key in first]
    if names:
        items.append({"label": t("availableColumns"), "value": ", ".join(names)})
    return items


def _soil_name_summary(layers, key):
    names = list(dict.fromkeys(layer.get(key) for layer in layers))
    text = ", ".join(str(name) for name in names[:MAX_SOIL_NAMES])
    return text + ("..." if len(names) > MAX_SOIL_NAMES else "")


def build_layer_items(record, t):
    layers = get_rows(record)
    items = [{"label": t("numberOfLayers"), "value": len(layers)}]
    if not layers:
        return items

    items.append({
        "label": t("depthRange"),
        "value": f"{layers[0][UPPER_BOUNDARY]:.2f} - {layers[-1][LOWER_BOUNDARY]:.2f} m",
    })

    if require_data_type(record) == BHR_G:
        items.append({"label": t("soilTypesNEN5104"), "value": _soil_name_summary(layers, "soilNameNEN5104")})
        anthropogenic = sum(1 for layer in layers if layer.get("anthropogenic"))
        if anthropogenic:
            items.append({"label": t("anthropogenicLayers"), "value": anthropogenic})
        rooted = sum(1 for layer in layers if layer.get("rooted"))
        if rooted:
            items.append({"label": t("rootedLayers"), "value": rooted})
    else:
        items.append({"label": t("soilTypes"), "value": _soil_name_summary(layers, "geotechnicalSoilName")})
    return items


def build_analysis_items(record, t):
    analysis = record.get("analysis")
    if not analysis:
        return []

    items = build_items(analysis, (
        _date("analysisReportDate", "analysisReportDate"),
        _text("analysisProcedure", "analysisProcedure"),
    ), t)
    intervals = analysis.get("investigatedIntervals") or []
    items.append({"label": t("investigatedIntervals"), "value": len(intervals)})
    unique_types = get_unique_determination_types(intervals)
    if unique_types:
        items.append({"label": t("determinationTypes"), "value": ", ".join(unique_types)})
    return items


def _fields(fields):
    return lambda record, t: build_items(record, fields, t)


# (section id, title key, builder)
CPT_SECTIONS = (
    ("survey", "surveyInformation", _fields(CPT_SURVEY_FIELDS)),
    ("location", "locationInformation", build_location_items),
    ("equipment", "equipmentSpecifications", _fields(CPT_EQUIPMENT_FIELDS)),
    ("processing", "processingInformation", _fields(CPT_PROCESSING_FIELDS)),
    ("zero_load", "zeroLoadMeasurements", _fields(CPT_ZERO_LOAD_FIELDS)),
    ("measurements", "measurementData", build_measurement_items),
)

BHR_G_SECTIONS = (
    ("survey", "boreholeInformation", _fields(BHR_G_SURVEY_FIELDS)),
    ("location", "locationInformation", build_location_items),
    ("boring", "boringInformation", _fields(BORING_FIELDS)),
    ("sampling", "samplingInformation", _fields(BHR_G_SAMPLING_FIELDS)),
    ("description", "descriptionInformation", _fields(BHR_G_DESCRIPTION_FIELDS)),
    ("context", "surveyContext", _fields(BHR_G_CONTEXT_FIELDS)),
    ("intervals", "intervalData", _fields(BHR_G_INTERVAL_FIELDS)),
    ("layers", "geologicalLayerData", build_layer_items),
    ("registration", "registrationInformation", _fields(REGISTRATION_FIELDS)),
)

BHR_GT_SECTIONS = (
    ("survey", "boreholeInformation", _fields(BHR_GT_SURVEY_FIELDS)),
    ("location", "locationInformation", build_location_items),
    ("boring", "boringInformation", _fields(BORING_FIELDS)),
    ("sampling", "samplingInformation", _fields(BHR_GT_SAMPLING_FIELDS)),
    ("description", "descriptionInformation", _fields(BHR_GT_DESCRIPTION_FIELDS)),
    ("context", "surveyContext", _fields(BHR_GT_CONTEXT_FIELDS)),
    ("intervals", "intervalData", _fields(BHR_GT_INTERVAL_FIELDS)),
    ("layers", "layerData", build_layer_items),
    ("analysis", "laboratoryAnalysis", build_analysis_items),
    ("registration", "registrationInformation", _fields(REGISTRATION_FIELDS)),
)

SECTIONS_BY_TYPE = {
    CPT: CPT_SECTIONS,
    BHR_G: BHR_G_SECTIONS,
    BHR_GT: BHR_GT_SECTIONS,
}


def build_header_sections(record, t=None):
    """Ordered, non-empty header sections for any BRO record."""
    t = t or get_translator()
    sections = SECTIONS_BY_TYPE[require_data_type(record)]
    built = [
        {"id": section_id, "title": t(title), "items": builder(record, t)}
        for section_id, title, builder in sections
    ]
    return [section for section in built if section["items"]]


def _location_summary(location):
    code = normalize_epsg(location[EPSG])
    return f"{get_coord_system_name(code)} (EPSG:{code}): {location[X]:.2f}, {location[Y]:.2f}"


def build_summary_items(filename, record, t=None):
    """Compact header rows shown above the detailed sections."""
    t = t or get_translator()
    dtype = require_data_type(record)

    items = [{"label": t("filename"), "value": filename}]
    items.extend(build_items(record, (
        HeaderField(BRO_ID, "broId", is_truthy),
        HeaderField(QUALITY_REGIME, "qualityRegime", is_truthy),
        _date(REPORT_DATE, "reportDate"),
    ), t))

    location = record.get(DELIVERED_LOCATION) or record.get(STANDARDIZED_LOCATION)
    if location:
        items.append({"label": t("location"), "value": _location_summary(location)})
        wgs84 = to_wgs84(location)
        if wgs84 is not None:
            items.append({"label": t("wgs84"), "value": f"{wgs84['lat']:.6f}, {wgs84['lon']:.6f}"})

    offset = record.get(VERTICAL_OFFSET)
    if offset is not None:
        datum = (record.get(VERTICAL_DATUM) or "").upper()
        items.append({"label": t("surfaceLevel"), "value": f"{offset:.2f} m {datum}".rstrip()})

    final_depth = get_final_depth(record)
    if final_depth is not None:
        label = "finalDepth" if dtype == CPT else "finalBoreDepth"
        items.append({"label": t(label), "value": as_meters(final_depth, t)})

    if dtype in (CPT, BHR_GT):
        items.extend(build_items(record, (_meters(GROUNDWATER_LEVEL, "waterLevel"),), t))
    if dtype == CPT:
        items.extend(build_items(record, (HeaderField("quality_class", "qualityClass"),), t))
    else:
        items.extend(build_items(record, (_text("description_procedure", "classificationStandard"),), t))
    return items
