#!/usr/bin/env python3
"""Development server runner for themeday."""

import uvicorn

from themeday.config import ServiceSettings
from themeday.logging_utils import configure_logging

if __name__ == "__main__":
    settings = ServiceSettings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        "themeday.api:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower()
    )
