"""
Prefect flows.

Flows:
- report: read the location CSV, fetch weather per city, write the report CSV

Usage (local):
    python -m csv_weather.flows.report cities.csv report.csv [YYYY-MM-DD]

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    csv-weather report -i cities.csv -o report.csv
"""
