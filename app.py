"""
Proof-of-existence registry service.

Clients register a file's digest with descriptive metadata and, optionally,
the file bytes. Each digest can be registered exactly once; the registry
records the caller principal and a registration timestamp alongside it.

Endpoints:
    - GET  /health - Liveness check
    - POST /register - Register a digest (multipart form or JSON)
    - GET  /files - List all entries, without content
    - GET  /files/<digest> - Full entry including content
    - GET  /files/<digest>/metadata - Entry without content
    - GET  /files/<digest>/content - Download stored file bytes
    - POST /verify - Look up a digest by {"hash": ...}

Environment Variables:
    LOG_LEVEL, FLASK_HOST, FLASK_PORT, MAX_REQUEST_SIZE, CALLER_HEADER,
    ANONYMOUS_PRINCIPAL, CORS_ALLOW_ORIGIN, SNAPSHOT_PATH

Example:
    $ LOG_LEVEL=DEBUG python app.py
    $ curl -F file=@report.pdf -F owner_name=Alice localhost:8000/register
    $ curl -H 'Content-Type: application/json' -d '{"hash": "<sha256>"}' localhost:8000/verify
"""

import logging

from proofnest.config import config
from proofnest.routes import app

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point for the registry application."""
    debug_mode = logger.getEffectiveLevel() == logging.DEBUG
    logger.info(f"Starting proof registry service on {config.FLASK_HOST}:{config.FLASK_PORT}")
    logger.info(f"Configuration: {config}")
    logger.info(f"Log level: {logging.getLevelName(logger.getEffectiveLevel())}")
    if debug_mode:
        logger.info("Flask debug mode enabled")
    app.run(host=config.FLASK_HOST, port=config.FLASK_PORT, debug=debug_mode)


if __name__ == "__main__":
    main()
