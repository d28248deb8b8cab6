# src/fio_csv/observability/names.py

"""Standard metric names for fio-csv observability.

Use these constants instead of hardcoded strings so every backend sees
the same series.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
CSV_PARSE_DURATION = "csv_parse_duration"

# Counters
CSV_PARSE_REQUESTS_TOTAL = "csv_parse_requests_total"
CSV_PARSE_ERRORS_TOTAL = "csv_parse_errors_total"

# Counters (rows accumulate over time)
CSV_ROWS_PARSED = "csv_rows_parsed"
CSV_ROW_ERRORS_TOTAL = "csv_row_errors_total"

# Gauges
CSV_COLUMNS = "csv_columns"


# ============================================================================
# Writer Metrics
# ============================================================================

# Duration
CSV_WRITE_DURATION = "csv_write_duration"

# Counters
CSV_ROWS_WRITTEN = "csv_rows_written"
