from __future__ import annotations

"""
Runtime Configuration Defaults.

The application keeps no configuration file and reads no environment
variables. A run is driven by this default dictionary merged with the
command-line overrides.
"""

import os
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "WARNING"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "input_path": os.getcwd(),

        # Report
        "show_files": True,
        "min_size": 0,
        "json_output": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": "",
    }
