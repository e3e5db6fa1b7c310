"""CSV input/output core.

Public API:
  - reader: read_locations (location list CSV -> LocationRecord list)
  - merge: merge, flatten (location -> observation mapping -> ReportRow list)
  - writer: write_report (ReportRow list -> report CSV)
  - models: ReportRow, REPORT_COLUMNS
"""

from csv_weather.tabular.merge import flatten, merge
from csv_weather.tabular.models import REPORT_COLUMNS, ReportRow
from csv_weather.tabular.reader import read_locations
from csv_weather.tabular.writer import write_report

__all__ = [
    "REPORT_COLUMNS",
    "ReportRow",
    "flatten",
    "merge",
    "read_locations",
    "write_report",
]
