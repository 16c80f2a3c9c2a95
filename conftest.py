"""Global pytest configuration.

Runs before any test module is imported, so the settings module sees the
test environment and never opens the on-disk database or log files.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("SEED_DEFAULTS", "true")
