"""
common/logging_config.py

Logging setup shared by the PMS app and its helper scripts.
Every module logs through `logging.getLogger(__name__)`; this module only
decides where those records go and how they look.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    component_name: str,
    level=logging.INFO,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
):
    """
    Configure logging for a PMS component.

    Args:
        component_name: Component identifier (e.g., 'pms', 'auth')
        level: Logging level name or number (DEBUG, INFO, WARNING, ...)
        log_file: Optional file path for log output
        format_string: Custom format string (default provided)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = f'[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(name)s - %(message)s'

    # Streamlit re-runs the script on every interaction, so only attach once.
    root = logging.getLogger()
    root.setLevel(level)
    already_configured = any(getattr(h, "_pms_handler", False) for h in root.handlers)

    if not already_configured:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(logging.Formatter(format_string, datefmt=DATE_FORMAT))
        stream_handler._pms_handler = True
        root.addHandler(stream_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(format_string, datefmt=DATE_FORMAT))
            file_handler._pms_handler = True
            root.addHandler(file_handler)

    logger = logging.getLogger(component_name)
    if not already_configured:
        logger.info(f"{component_name.upper()} logging initialized (level={logging.getLevelName(level)})")

    return logger
