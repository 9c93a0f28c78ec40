# wsschema/constants.py

"""
Constants module.

Default values used throughout wsschema. Every setting here has a matching
`WSSCHEMA_*` environment variable read by `wsschema.config`.
"""

from pathlib import Path

WSSCHEMA_BASE_DIR: Path = Path(__file__).resolve().parent.parent
WSSCHEMA_DEV_MODE: bool = False
WSSCHEMA_LOG_LEVEL: str = "WARNING"

# CONFIG
WSSCHEMA_CONFIG_DIR: Path = WSSCHEMA_BASE_DIR / "config"
WSSCHEMA_CONFIG_TOML_FILE: Path = WSSCHEMA_CONFIG_DIR / "wsschema.config.toml"
WSSCHEMA_CONFIG_ENV_FILE: Path = WSSCHEMA_CONFIG_DIR / "wsschema.config.env"

# VALIDATION
WSSCHEMA_VALIDATION_STRICT: bool = False

# ENVELOPE
ENVELOPE_EVENT_FIELD: str = "event"
ENVELOPE_DATA_FIELD: str = "data"
