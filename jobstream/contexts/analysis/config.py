"""
Analysis configuration loading.

Settings live in a YAML file (analysis_config.yaml beside this module by
default, or the file named by ANALYSIS_CONFIG_PATH). A partial override file
is merged over the packaged defaults, so it only needs the keys it changes.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).parent / "analysis_config.yaml"
ANALYSIS_CONFIG_PATH = Path(os.getenv("ANALYSIS_CONFIG_PATH", DEFAULT_CONFIG_PATH))


def load_analysis_config(config_path: Path = None) -> Dict[str, Any]:
    """
    Load analysis settings as a plain dict.

    Args:
        config_path: Optional path to a YAML override (defaults to ANALYSIS_CONFIG_PATH)

    Returns:
        Nested dict with word_frequency, queries and dates sections

    Raises:
        FileNotFoundError: If config_path does not exist
    """
    if config_path is None:
        config_path = ANALYSIS_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Analysis config not found at {config_path}")

    defaults = OmegaConf.load(DEFAULT_CONFIG_PATH)
    if config_path.resolve() == DEFAULT_CONFIG_PATH.resolve():
        merged = defaults
    else:
        merged = OmegaConf.merge(defaults, OmegaConf.load(config_path))

    return OmegaConf.to_container(merged, resolve=True)
