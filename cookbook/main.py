import logging

import uvicorn
from cookbook.api.api_run import create_app
from cookbook.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url = f"http://localhost:{APP_PORT}"
    logging.getLogger("cookbook_app").info("Serving on %s (Press CTRL+C to quit)", local_url)
    uvicorn.run(create_app(), host=APP_HOST, port=APP_PORT)
