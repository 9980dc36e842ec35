# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import chart, export, headers, lab, view

__all__ = [
	"chart",
	"export",
	"headers",
	"lab",
	"view",
]
