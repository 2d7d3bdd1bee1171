"""
Floor Plan Layout Store – server entry point.

Runs the FastAPI app with uvicorn on HOST:PORT.
"""

import logging
import uvicorn
from floorplan.config import Settings
from floorplan.server import create_app

logger = logging.getLogger(__name__)


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app(settings=settings)
    logger.info("Backend server running at http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
