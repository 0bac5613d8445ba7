"""
cube_server.py — command line entry point for the cube HTTP API
=================================================================

Starts the Flask application from `cube_api` on a Werkzeug server.

Features & behavior:
 - CLI flags for host, port and debug logging.
 - The default port comes from the PORT environment variable (8080 if unset).
 - If the port is busy the next ones are tried, up to PORT_ATTEMPTS ports.
 - SIGINT/SIGTERM stop the server cleanly.

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Optional, Sequence

from werkzeug.serving import BaseWSGIServer, make_server

from cube_api import create_app
from cube_config import PORT_ATTEMPTS, SERVER_HOST, SERVER_PORT

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
logger = logging.getLogger("cube_server")


def create_arg_parser() -> argparse.ArgumentParser:
    """
    Build and return the CLI argument parser.
    """
    p = argparse.ArgumentParser(
        description="Rubik's cube state API",
        allow_abbrev=False,
    )
    p.add_argument("--host", default=SERVER_HOST, help="Interface to bind.")
    p.add_argument("--port", type=int, default=SERVER_PORT, help="First port to try.")
    p.add_argument("--attempts", type=int, default=PORT_ATTEMPTS,
                   help="How many consecutive ports to try.")
    p.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return p


def bind_server(app, host: str, port: int, attempts: int = PORT_ATTEMPTS) -> BaseWSGIServer:
    """Bind `app` to the first free port in [port, port + attempts)."""
    for candidate in range(port, port + max(1, attempts)):
        try:
            return make_server(host, candidate, app, threaded=True)
        except (OSError, SystemExit) as e:
            # werkzeug reports a busy port with sys.exit(1) instead of raising
            logger.info("Could not bind port %d (%r), trying %d...", candidate, e, candidate + 1)
    raise OSError(f"Could not bind to any port in {port}..{port + attempts - 1}")


def _install_signal_handlers():
    def _handler(signum, frame):
        logger.info("Received signal %s, initiating shutdown...", signum)
        raise SystemExit(0)

    for sig_name in ("SIGINT", "SIGTERM"):
        if hasattr(signal, sig_name):
            signal.signal(getattr(signal, sig_name), _handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point. Returns integer exit code.
    """
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled.")

    try:
        server = bind_server(create_app(), args.host, args.port, args.attempts)
    except OSError as e:
        logger.error("Error: %s", e)
        return 2

    _install_signal_handlers()
    logger.info("Cube API running on http://%s:%d", args.host, server.server_port)
    try:
        server.serve_forever()
    except SystemExit:
        logger.info("Shutdown requested (SystemExit).")
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
