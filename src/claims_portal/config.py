"""Configuration loading via Hydra's Compose API.

The Streamlit app cannot use ``@hydra.main`` (Streamlit owns the process and
re-runs the script), so it composes ``conf/config.yaml`` directly.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from hydra import compose, initialize_config_dir
from omegaconf import DictConfig, open_dict

# Load .env BEFORE composing so ${oc.env:...} references resolve
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONF_DIR = Path(os.getenv("CLAIMS_PORTAL_CONF_DIR", PROJECT_ROOT / "conf"))


def load_config(overrides: list[str] | None = None, *, config_dir: Path | None = None) -> DictConfig:
    """Compose the application config.

    Parameters
    ----------
    overrides:
        Hydra override strings, e.g. ``["api.base_url=http://api:8000"]``.
    config_dir:
        Directory holding ``config.yaml``; defaults to :data:`CONF_DIR`.
    """
    conf_dir = Path(config_dir or CONF_DIR).resolve()
    with initialize_config_dir(config_dir=str(conf_dir), version_base=None):
        cfg = compose(config_name="config", overrides=list(overrides or []))
    resolve_data_paths(cfg, PROJECT_ROOT)
    return cfg


def resolve_data_paths(cfg: DictConfig, root: Path) -> None:
    """Anchor relative ``cfg.data`` paths to *root*."""
    if "data" not in cfg:
        return
    with open_dict(cfg):
        for key, raw in cfg.data.items():
            path = Path(str(raw))
            if not path.is_absolute():
                cfg.data[key] = str(root / path)
