import logging

import uvicorn
from cocktail.api.api_run import app
from cocktail.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from cocktail.utilities.network import get_local_ip, lan_url


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url = f"http://localhost:{APP_PORT}"
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    # Also show the LAN-accessible URL for other devices on the same network
    if get_local_ip() not in ("127.0.0.1", "localhost"):
        print(f"Accessible from other devices at: {lan_url(APP_PORT)}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
