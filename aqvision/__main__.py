"""Runs the gateway with uvicorn: `python -m aqvision`."""

import uvicorn

from aqvision.config import settings


def main():
    uvicorn.run(
        "aqvision.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
