"""Root conftest — shared test configuration."""

import os

# Keep test output quiet and human-readable regardless of the developer's .env
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")
