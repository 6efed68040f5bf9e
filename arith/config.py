"""Settings for the arith interpreter.

Every value can be overridden with an environment variable prefixed with
``ARITH_``. Command-line flags in ``arith/repl.py`` take precedence over these.
"""

import importlib.metadata
import os

try:
    VERSION = importlib.metadata.version("arith")
except importlib.metadata.PackageNotFoundError:
    VERSION = "0.1.0"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Reject tokens left over after a complete expression, e.g. "1 + 3)"
STRICT_PARSE = _env_flag("ARITH_STRICT_PARSE", "false")

LOG_LEVEL = os.getenv("ARITH_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("ARITH_LOG_FILE") or None

REPL_PROMPT = "arith> "
