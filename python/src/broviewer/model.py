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


"""Container objects for a set of parsed BRO files.

Records stay plain mappings keyed by filename. The dataset threads viewer
settings (locale, map bounds, plot sizes) into the header, export and map
helpers.
"""

import functools
import logging
import os

from broviewer.datamodel import CPT, QUALITY_REGIME, REPORT_DATE, get_final_depth, require_data_type
from broviewer.format import iso_date
from broviewer.i18n import CATALOGS, DEFAULT_LOCALE, get_translator
from broviewer.map import NL_BOUNDS, plot_survey_map
from broviewer.survey import export, headers, view

logger = logging.getLogger(__name__)

DEFAULT_QUALITY_REGIME = "IMBRO/A"
FILE_ROW_COLUMNS = ("id", "filename", "reportDate", "type", "finalDepth", "qualityRegime")


class ConfigError(ValueError):
    def __init__(self, key, value, message):
        self.key = key
        self.value = value
        self.message = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


class ViewerConfig:
    def __init__(self, locale=DEFAULT_LOCALE, map_bounds=None, plot_height=800, min_layer_height_px=15, metadata=None):
        self.locale = locale
        self.map_bounds = tuple(map_bounds) if map_bounds is not None else NL_BOUNDS
        self.plot_height = plot_height
        self.min_layer_height_px = min_layer_height_px
        self.metadata = metadata or {}
        self.validate()

    @classmethod
    def from_env(cls, environ=None):
        """Settings from BROVIEWER_* environment variables.

        Raises ConfigError for an unknown locale or a non-positive plot
        height, ValueError when a number cannot be parsed.
        """
        environ = os.environ if environ is None else environ
        return cls(
            locale=environ.get("BROVIEWER_LOCALE", DEFAULT_LOCALE),
            plot_height=int(environ.get("BROVIEWER_PLOT_HEIGHT", "800")),
            min_layer_height_px=float(environ.get("BROVIEWER_MIN_LAYER_HEIGHT_PX", "15")),
        )

    def validate(self):
        if self.locale not in CATALOGS:
            raise ConfigError("locale", self.locale, f"must be one of {sorted(CATALOGS)}")
        if self.plot_height <= 0:
            raise ConfigError("plot_height", self.plot_height, "must be > 0 (pixels)")
        lat_min, lat_max, lon_min, lon_max = self.map_bounds
        if lat_min >= lat_max or lon_min >= lon_max:
            raise ConfigError("map_bounds", self.map_bounds, "expected (lat_min, lat_max, lon_min, lon_max)")
        return self

    def update(self, **kwargs):
        for key, val in kwargs.items():
            setattr(self, key, val)
        return self.validate()

    def to_dict(self):
        return {
            "locale": self.locale,
            "map_bounds": self.map_bounds,
            "plot_height": self.plot_height,
            "min_layer_height_px": self.min_layer_height_px,
            "metadata": self.metadata,
        }


def _compare_cells(a, b):
    numeric = isinstance(a, (int, float)) and isinstance(b, (int, float))
    if not numeric:
        a, b = str(a), str(b)
    return (a > b) - (a < b)


def sort_file_rows(rows, sort_by="filename", descending=False):
    """Sort file table rows on one column. Missing values always go last."""
    present = [row for row in rows if row.get(sort_by) is not None]
    missing = [row for row in rows if row.get(sort_by) is None]
    present.sort(key=functools.cmp_to_key(lambda a, b: _compare_cells(a[sort_by], b[sort_by])), reverse=descending)
    return present + missing


class BroDataset:
    def __init__(self, config=None, records=None):
        self.config = config or ViewerConfig()
        self.records = {}
        for filename, record in (records or {}).items():
            self.add(filename, record)

    @property
    def t(self):
        return get_translator(self.config.locale)

    def add(self, filename, record):
        require_data_type(record)
        if filename in self.records:
            logger.debug("Replacing record %s", filename)
        self.records[filename] = record
        return self

    def remove(self, filename):
        self.records.pop(filename, None)
        return self

    def get(self, filename):
        return self.records[filename]

    def filenames(self):
        return list(self.records)

    def select(self, filenames):
        wanted = set(filenames)
        return BroDataset(
            config=self.config,
            records={name: record for name, record in self.records.items() if name in wanted},
        )

    def copy(self):
        return BroDataset(config=ViewerConfig(**self.config.to_dict()), records=dict(self.records))

    def file_rows(self, sort_by="filename", descending=False):
        if sort_by not in FILE_ROW_COLUMNS:
            raise ValueError(f"Cannot sort file rows by {sort_by!r}; expected one of {FILE_ROW_COLUMNS}")
        rows = []
        for filename, record in self.records.items():
            rows.append({
                "id": filename,
                "filename": filename,
                "reportDate": iso_date(record.get(REPORT_DATE)),
                "type": require_data_type(record),
                "finalDepth": get_final_depth(record),
                "qualityRegime": record.get(QUALITY_REGIME) or DEFAULT_QUALITY_REGIME,
            })
        return sort_file_rows(rows, sort_by=sort_by, descending=descending)

    def header_sections(self, filename):
        return headers.build_header_sections(self.get(filename), t=self.t)

    def summary_items(self, filename):
        return headers.build_summary_items(filename, self.get(filename), t=self.t)

    def to_csv(self, filename):
        return export.bro_data_to_csv(self.get(filename))

    def to_json(self, filename):
        return export.dumps_bro_data(self.get(filename))

    def to_geojson(self):
        return export.create_geojson(self.records)

    def to_geodataframe(self):
        return export.to_geodataframe(self.records)

    def survey_map(self, selected=None):
        return plot_survey_map(self.records, selected=selected, bounds=self.config.map_bounds)

    def survey_plot(self, filename, x_key=None, y_key=None):
        """CPT chart or bore log for one file, sized by the config."""
        record = self.get(filename)
        if require_data_type(record) == CPT:
            return view.plot_cpt(record, x_key=x_key, y_key=y_key, height=self.config.plot_height)
        return view.plot_bore_log(
            record,
            t=self.t,
            height=self.config.plot_height,
            min_layer_height_px=self.config.min_layer_height_px,
        )
