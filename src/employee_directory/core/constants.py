"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# (MAX_PAGE - 1) * MAX_PAGE_SIZE must stay inside a signed 32-bit OFFSET.
MAX_PAGE = 1_000_000

# Range of the MySQL INT columns (id, dependents_count).
DB_INT_MIN = -2_147_483_648
DB_INT_MAX = 2_147_483_647

NO_RESULTS_MESSAGE = "No employees matched your search."
UPDATE_SUCCESS_MESSAGE = "Dependents count updated."
