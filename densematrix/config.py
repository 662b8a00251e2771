"""Package-wide numeric defaults.

Every routine that consults one of these values also accepts it as a keyword
argument, so callers can override a default for a single call without
touching module state.
"""

# Entries with an absolute value at or below this are treated as zero when
# searching for a pivot during row reduction.
PIVOT_TOLERANCE = 1e-7

# ``inverse`` refuses matrices whose determinant is at or below this fraction
# of the product of their row norms.
SINGULAR_TOLERANCE = 1e-7

# Cofactor expansion is O(n!); orders at or above this are logged.
DETERMINANT_WARN_ORDER = 9

DISPLAY_FORMAT = "{:f}"
