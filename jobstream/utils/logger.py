"""
Session logger setup shared by all contexts.

Each session gets its own directory holding one DEBUG-level log file per
context, while the console only shows INFO and above. Context-specific
wrappers (with message prefixes) live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from jobstream import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# Console colors applied on top of loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Replaces any handlers already installed, then writes a provenance header.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "analysis")
        log_dir: Session directory (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Console color overrides (e.g., {"INFO": "<cyan>"})
        console_level: Minimum level shown on the console

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def setup_console_logger(level: str = "WARNING") -> None:
    """
    Route loguru output to stderr only, dropping messages below `level`.

    Used by scripts that run without a session log. The sink looks up
    sys.stderr on every write so redirected streams are honored.
    """
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), format=CONSOLE_FORMAT, level=level)


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log how this session was started: script, command line, cwd and versions.

    Args:
        extra_context: Additional key-value pairs to log
    """
    provenance = {
        "Script": sys.argv[0],
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "jobstream": __version__,
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in provenance.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
