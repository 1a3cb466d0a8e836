# -*- coding: utf-8 -*-
"""Console rendering and export of kernel results."""

from .console import ConsoleReporter, format_number, format_point
from .report import to_dict, to_json, save_json

__all__ = ["ConsoleReporter", "format_number", "format_point", "to_dict", "to_json", "save_json"]
