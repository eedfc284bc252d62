"""
Logging setup for applications using the OneSky client
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(settings: Optional[Dict[str, Any]] = None,
                      log_dir: Optional[Path] = None) -> None:
    """
    Configure root logging from the [logging] config section

    Args:
        settings: Mapping with optional 'level' and 'log_file_name'
        log_dir: Directory for the log file, defaults to the working directory
    """
    settings = settings or {}
    level = getattr(logging, str(settings.get('level', 'INFO')).upper(), logging.INFO)

    handlers = [logging.StreamHandler()]
    log_file_name = settings.get('log_file_name')
    if log_file_name:
        log_path = Path(log_dir or Path.cwd()) / log_file_name
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
