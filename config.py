"""
DevOps Pipeline App - Configuration

All environment variables, constants, and settings in one place.
"""

import os

# --- Server Configuration ---
HOST = "0.0.0.0"
PORT = 3000  # fixed, not read from the environment

# --- Version ---
DEFAULT_APP_VERSION = "1.0.0"

# --- Response Literals ---
APP_MESSAGE = "Hello from DevOps Pipeline!"
APP_ENVIRONMENT = "production"
HEALTHY_STATUS = "healthy"

# --- API Configuration ---
API_VERSION = "1.0.0"

# --- Service Info ---
SERVICE_NAME = "DevOps Pipeline App"
SERVICE_DESCRIPTION = """
## Overview
Minimal service deployed by the DevOps pipeline.

## Endpoints
- `GET /` - service info and version
- `GET /health` - liveness probe with uptime and memory usage
"""


def get_app_version() -> str:
    """Return APP_VERSION, or the default when it is unset or empty."""
    return os.environ.get("APP_VERSION") or DEFAULT_APP_VERSION
