"""Root conftest: shared test configuration."""

import os

# Never reach for a real Redis from the test suite
os.environ.setdefault("NOTIFICATION_BACKEND", "memory")
os.environ.setdefault("REDIS_URI", "redis.invalid")
os.environ.setdefault("LOG_FORMAT", "text")
