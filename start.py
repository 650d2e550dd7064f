#!/usr/bin/env python3
"""
Runs slappd under uvicorn.

SIGINT/SIGTERM stop new connections and give in-flight requests
SHUTDOWN_GRACE_PERIOD seconds to finish.
"""

import logging
import uvicorn
from slappd.config import get_settings
from slappd.main import uvicorn_options

logger = logging.getLogger("slappd.start")

if __name__ == "__main__":
    settings = get_settings()
    options = uvicorn_options(settings)
    
    logger.info(f"slappd listening on {options['host']}:{options['port']}")
    uvicorn.run("slappd.main:app", **options)
