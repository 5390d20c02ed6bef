"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

# requests/urllib3 log every connection at DEBUG; only show real warnings.
logging.getLogger("urllib3").setLevel(logging.WARNING)
