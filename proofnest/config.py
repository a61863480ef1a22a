"""
Configuration module for the proof registry.

Loads all configuration from environment variables with sensible defaults.
"""

import os


class Config:
    """
    Registry configuration from environment variables.

    Loads all configuration values from environment variables with sensible defaults.
    All settings can be overridden by setting the corresponding environment variable.
    """

    def __init__(self):
        """
        Initialize configuration from environment variables.

        Environment Variables:
            LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO
            FLASK_HOST: Server bind address. Default: 0.0.0.0
            FLASK_PORT: Server bind port. Default: 8000
            MAX_REQUEST_SIZE: Largest accepted request body in bytes. Default: 4194304
            CALLER_HEADER: Header carrying the caller principal. Default: X-Caller-Principal
            TRUST_CALLER_HEADER: Read CALLER_HEADER at all (set only behind a proxy that
                overwrites it). Default: false
            ANONYMOUS_PRINCIPAL: Principal used when no caller header is sent. Default: 2vxsx-fae
            CORS_ALLOW_ORIGIN: Access-Control-Allow-Origin value. Default: *
            SNAPSHOT_PATH: JSON file the registry is persisted to. Default: unset (memory only)
        """
        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Server
        self.FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
        self.FLASK_PORT = int(os.getenv("FLASK_PORT", "8000"))

        # Base64 JSON bodies are ~4/3 of the raw content, so leave headroom
        # above the 2 MiB content ceiling.
        self.MAX_REQUEST_SIZE = int(os.getenv("MAX_REQUEST_SIZE", str(4 * 1024 * 1024)))

        # Caller identity
        self.CALLER_HEADER = os.getenv("CALLER_HEADER", "X-Caller-Principal")
        self.TRUST_CALLER_HEADER = os.getenv("TRUST_CALLER_HEADER", "false").lower() in ("1", "true", "yes")
        self.ANONYMOUS_PRINCIPAL = os.getenv("ANONYMOUS_PRINCIPAL", "2vxsx-fae")

        # CORS
        self.CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")

        # Durability
        self.SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", "")

    def __repr__(self):
        """String representation for logging."""
        return (
            f"Config(LOG_LEVEL={self.LOG_LEVEL}, "
            f"FLASK_HOST={self.FLASK_HOST}, "
            f"FLASK_PORT={self.FLASK_PORT}, "
            f"MAX_REQUEST_SIZE={self.MAX_REQUEST_SIZE}, "
            f"CALLER_HEADER={self.CALLER_HEADER}, "
            f"TRUST_CALLER_HEADER={self.TRUST_CALLER_HEADER}, "
            f"SNAPSHOT_PATH={self.SNAPSHOT_PATH or None})"
        )


# Global config instance
config = Config()
