import os

import uvicorn

from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="server")


if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5000))
    logger.info(f"Starting weather API on {host}:{port}")

    uvicorn.run(
        "weather_app.main:app",
        host=host,
        port=port,
        reload=False,
    )
