#!/usr/bin/env python3
"""Run script for recurdate."""

import uvicorn

from recurdate import config

if __name__ == "__main__":
    uvicorn.run(
        "recurdate.api.app:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level=config.LOG_LEVEL,
    )
