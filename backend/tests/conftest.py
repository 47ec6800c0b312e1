"""Root conftest — shared test configuration."""

import os

# Ensure tests never talk to a real database or provider
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("TWITTER_API_BASE_URL", "https://twitter.invalid/1.1")
