"""
Gatekeeper Demo - Configuration
"""
import os
from typing import Mapping, Optional

DEFAULT_PORT = 3000
BIND_HOST = '0.0.0.0'


class AppConfig:
    """Runtime settings, read once at startup and passed to the server"""

    def __init__(self, port: int = DEFAULT_PORT, host: str = BIND_HOST):
        self.port = port
        self.host = host

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AppConfig':
        """Build config from PORT; a non-integer value raises ValueError"""
        if environ is None:
            environ = os.environ

        raw_port = environ.get('PORT') or str(DEFAULT_PORT)
        return cls(port=int(raw_port.strip()))

    def to_dict(self) -> dict:
        return {
            'host': self.host,
            'port': self.port
        }
