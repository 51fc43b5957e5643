# src/massbank_kit/observability/names.py

"""Metric names emitted by the parser, the validators and the SPLASH client.

Durations are in milliseconds. Counters only ever go up; gauges hold the
last value seen.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "record_parse_duration"

# Counters
PARSE_RECORDS_TOTAL = "record_parse_records_total"
PARSE_ERRORS_TOTAL = "record_parse_errors_total"

# Gauges
PARSE_LINE_COUNT = "record_parse_line_count"


# ============================================================================
# Validation Metrics
# ============================================================================

# Duration
VALIDATION_DURATION = "validation_duration"
VALIDATION_INPUT_DURATION = "validation_input_duration"

# Counters (accumulate over batches)
VALIDATION_INPUTS_TOTAL = "validation_inputs_total"
VALIDATION_ERRORS_TOTAL = "validation_errors_total"
VALIDATION_WARNINGS_TOTAL = "validation_warnings_total"
VALIDATION_DUPLICATES_TOTAL = "validation_duplicates_total"


# ============================================================================
# SPLASH Metrics
# ============================================================================

# Duration
SPLASH_REQUEST_DURATION = "splash_request_duration"

# Counters
SPLASH_REQUESTS_TOTAL = "splash_requests_total"
SPLASH_ERRORS_TOTAL = "splash_errors_total"
SPLASH_MISMATCHES_TOTAL = "splash_mismatches_total"
