"""Root conftest — shared test configuration."""

import os

# Tests must not depend on a developer's local .env
os.environ.setdefault("BUILD_VERSION", "135")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DEV_MODE", "false")
