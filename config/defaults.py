"""Default configuration constants for the Fragmentation Theater booking service."""

import os

# Hall dimensions (fixed for the lifetime of a service instance)
DEFAULT_ROWS = int(os.environ.get("SEAT_HALL_ROWS", 8))
DEFAULT_SEATS_PER_ROW = int(os.environ.get("SEAT_HALL_SEATS_PER_ROW", 12))

# Last resort: fragmenting bookings are allowed once this few seats remain
LAST_RESORT_MAX_FREE = 4

# Single-seat parties skip the fragmentation check when True.
# When False they are checked and last resort applies at LAST_RESORT_MAX_FREE regardless of size.
SINGLE_SEAT_EXEMPT = True

# Alternative blocks offered on a fragmentation rejection
MAX_SUGGESTIONS = 3

# Seat identifier wire format: "{row}-{index}", zero-based
SEAT_ID_SEPARATOR = "-"
# Longest accepted row or index part, leading zeros included
SEAT_ID_MAX_DIGITS = 9

DEFAULT_CUSTOMER_NAME = "Guest"

# Attempt history kept by the ledger (oldest entries dropped first)
HISTORY_LIMIT = 200

# Logging
LOG_LEVEL = os.environ.get("SEAT_LOG_LEVEL", "INFO")

# UI
MAX_PARTY_SIZE = 10
SEAT_COLORS = {
    "occupied": "#E8734A",
    "bookable": "#4A90D9",
    "blocked": "#D9D9D9",
    "selected": "#F5C542",
}
