"""Application settings."""

import os
from pathlib import Path

# Backend API
API_BASE_URL = os.getenv("SITE_API_URL", "http://localhost:8000/api")
API_TIMEOUT = int(os.getenv("SITE_API_TIMEOUT", "60"))
API_TOKEN = os.getenv("SITE_API_TOKEN")
MAX_CONCURRENT = int(os.getenv("SITE_MAX_CONCURRENT", "20"))

# Query cache (seconds)
STALE_TIME = float(os.getenv("SITE_STALE_TIME", "30"))
GC_TIME = float(os.getenv("SITE_GC_TIME", "300"))

# Local storage for visitor markers
STORAGE_PATH = Path(os.getenv("SITE_STORAGE_PATH", ".sitekit/storage.json"))

# Logging
LOG_DIR = Path(os.getenv("SITE_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("SITE_LOG_LEVEL", "INFO")
LOG_RETENTION = os.getenv("SITE_LOG_RETENTION", "7 days")
