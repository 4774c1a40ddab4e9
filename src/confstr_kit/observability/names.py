# src/confstr_kit/observability/names.py

"""Standard metric names for confstr-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
CONFSTR_PARSE_DURATION = "confstr_parse_duration"

# Counters
CONFSTR_PARSES_TOTAL = "confstr_parses_total"
CONFSTR_PARSE_ERRORS_TOTAL = "confstr_parse_errors_total"

# Counters (pairs accumulate over time)
CONFSTR_PAIRS_PARSED = "confstr_pairs_parsed"


# ============================================================================
# Catalog Metrics
# ============================================================================

# Duration
CONFSTR_CATALOG_LOAD_DURATION = "confstr_catalog_load_duration"

# Gauges
CONFSTR_CATALOG_ENTRIES = "confstr_catalog_entries"
