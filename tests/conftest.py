"""Root conftest — shared test configuration."""

import os

# Human-readable logs and a small payload bound for boundary tests
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("MAX_ITEMS", "100")
