from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CascadeConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    element_id_prefix: str = "pp-"  # fallback id prefix for elements without metadata
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> CascadeConfig:
        """Build a config from ``STYLECASCADE_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get("STYLECASCADE_HOST", defaults.host),
            port=int(env.get("STYLECASCADE_PORT", defaults.port)),
            debug=env.get("STYLECASCADE_DEBUG", "").lower() in ("1", "true", "yes"),
            element_id_prefix=env.get("STYLECASCADE_ID_PREFIX", defaults.element_id_prefix),
            log_level=env.get("STYLECASCADE_LOG_LEVEL", defaults.log_level).upper(),
        )
