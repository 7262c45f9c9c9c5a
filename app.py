import os
import socket

from sq_browser.ui.dash_app import create_dash_app
from sq_browser.logging_config import configure_logging

configure_logging()

app = create_dash_app()
server = app.server

PORT_SEARCH_RANGE = 100


def find_free_port(start_port: int) -> int:
    """First port at or above start_port nothing is listening on."""
    for port in range(start_port, start_port + PORT_SEARCH_RANGE):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8050"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        print(f"Port {preferred_port} in use, serving the stock screener on {port}")

    app.run(host="0.0.0.0", port=port, debug=debug)
