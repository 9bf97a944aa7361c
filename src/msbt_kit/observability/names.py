# src/msbt_kit/observability/names.py

"""Standard metric names for msbt-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
MSBT_PARSE_DURATION = "msbt_parse_duration"

# Counters
MSBT_PARSES_TOTAL = "msbt_parses_total"
MSBT_PARSE_ERRORS_TOTAL = "msbt_parse_errors_total"
MSBT_PARSE_WARNINGS = "msbt_parse_warnings"


# ============================================================================
# Section Metrics
# ============================================================================

# Counters (labelled by section tag)
MSBT_SECTIONS_DECODED = "msbt_sections_decoded"

# Counters (messages accumulate over time)
MSBT_MESSAGES_DECODED = "msbt_messages_decoded"
