"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real host
os.environ.setdefault("HOST_URL", "http://host.invalid")
os.environ.setdefault("HOST_TOKEN", "test-token")
