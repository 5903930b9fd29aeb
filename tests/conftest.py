"""Global test fixtures."""

import os

# Point the default Config at throwaway stores before any test builds one.
# This must happen at module load time, not in a fixture
os.environ.setdefault("INDEXSYNC_DATABASE__URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("INDEXSYNC_SEARCH__BACKEND", "memory")
