# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

import datetime
from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC_PATH = ROOT / "python" / "src"

if str(PYTHON_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC_PATH))


@pytest.fixture
def cpt_record():
    return {
        "meta": {"dataType": "CPT", "schemaVersion": "1.1"},
        "bro_id": "CPT000000012345",
        "quality_regime": "IMBRO",
        "research_report_date": datetime.date(2021, 3, 4),
        "delivered_location": {"epsg": "urn:ogc:def:crs:EPSG::28992", "x": 155000.0, "y": 463000.0},
        "standardized_location": None,
        "delivered_vertical_position_offset": 1.234,
        "delivered_vertical_position_datum": "nap",
        "delivered_vertical_position_reference_point": "maaiveld",
        "cpt_standard": "NEN-EN-ISO 22476-1",
        "quality_class": "klasse2",
        "final_depth": 20.5,
        "final_bore_depth": 99.0,
        "dissipationtest_performed": False,
        "cone_surface_area": 1500.0,
        "data": [
            {"penetrationLength": 0.02, "depth": 0.02, "coneResistance": 1.2, "localFriction": 0.01, "frictionRatio": 0.8},
            {"penetrationLength": 0.04, "depth": 0.04, "coneResistance": 1.5, "localFriction": None, "frictionRatio": 0.9},
            {"penetrationLength": 0.06, "depth": 0.06, "coneResistance": 2.1, "localFriction": 0.02, "frictionRatio": 1.0},
        ],
    }


@pytest.fixture
def bhrg_record():
    return {
        "meta": {"dataType": "BHR-G", "schemaVersion": "3.1"},
        "bro_id": "BHR000000111111",
        "quality_regime": None,
        "research_report_date": datetime.date(2019, 6, 1),
        "delivered_location": {"epsg": "EPSG:28992", "x": 121000.0, "y": 487000.0},
        "standardized_location": {"epsg": "EPSG:4258", "x": 52.37, "y": 4.89},
        "delivered_vertical_position_offset": -0.5,
        "delivered_vertical_position_datum": "NAP",
        "final_bore_depth": 5.0,
        "final_depth": 42.0,
        "bore_rock_reached": False,
        "bore_hole_completed": True,
        "description_procedure": "NEN5104",
        "data": [
            {"upperBoundary": 0.0, "lowerBoundary": 1.0, "soilNameNEN5104": "zand", "color": "bruin", "anthropogenic": True, "rooted": False},
            {"upperBoundary": 1.0, "lowerBoundary": 1.02, "soilNameNEN5104": "klei", "anthropogenic": False, "rooted": True},
            {"upperBoundary": 1.02, "lowerBoundary": 5.0, "soilNameNEN5104": "veen", "color": "zwart", "anthropogenic": False, "rooted": False},
        ],
    }


@pytest.fixture
def bhrgt_record():
    return {
        "meta": {"dataType": "BHR-GT", "schemaVersion": "2.1"},
        "bro_id": "BHR000000222222",
        "quality_regime": "IMBRO/A",
        "research_report_date": None,
        "delivered_location": {"epsg": "EPSG:28992", "x": 155000.0, "y": 463000.0},
        "standardized_location": None,
        "final_bore_depth": 8.0,
        "groundwater_level": 1.1,
        "data": [
            {"upperBoundary": 0.0, "lowerBoundary": 3.0, "geotechnicalSoilName": "zwakZandigeKleiMetGrind", "color": "grijs"},
            {"upperBoundary": 3.0, "lowerBoundary": 8.0, "geotechnicalSoilName": "zand", "dispersedInhomogeneity": True},
        ],
        "analysis": {
            "analysisReportDate": datetime.date(2020, 1, 2),
            "analysisProcedure": "NEN",
            "investigatedIntervals": [
                {
                    "beginDepth": 1.0,
                    "endDepth": 1.5,
                    "waterContentDetermination": {"waterContent": 23.5},
                    "particleSizeDistributionDetermination": {
                        "determinationMethod": "NEN",
                        "fraction0to2um": 10.0,
                        "fraction2to4um": 5.0,
                        "fraction63to90um": 25.0,
                        "fraction90to125um": 60.0,
                    },
                },
                {
                    "beginDepth": 4.0,
                    "endDepth": 4.4,
                    "consistencyLimitsDetermination": {"liquidLimit": 40.0, "plasticLimit": 20.0, "plasticityIndex": 20.0},
                    "particleSizeDistributionDetermination": [],
                },
            ],
        },
    }
