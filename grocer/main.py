import logging

import uvicorn
from grocer.api.api_run import app
from grocer.utilities.config import APP_HOST, APP_PORT, DEBUG, require_api_key


def main():
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)
    # Fail before binding the port if the AI credential is missing
    require_api_key()
    local_url = f"http://localhost:{APP_PORT}"
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    main()
