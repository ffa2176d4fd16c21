"""Development claims backend entry point.

Serves ``/api/claims`` from the bundled sample data so the Streamlit UI can
run without the real backend.

Usage::

    poetry run python -m claims_portal.main                 # default config
    poetry run python -m claims_portal.main server.port=9000  # override
"""

from __future__ import annotations

import hydra
import uvicorn
from dotenv import load_dotenv
from loguru import logger
from omegaconf import DictConfig

from claims_portal.api.app import create_app
from claims_portal.config import PROJECT_ROOT, resolve_data_paths

# Load .env BEFORE Hydra resolves ${oc.env:...} references
load_dotenv()


@hydra.main(version_base=None, config_path="../../conf", config_name="config")
def main(cfg: DictConfig) -> None:
    """Bootstrap the dev backend from Hydra config and run uvicorn."""
    # Relative data paths resolve against the project root, not the cwd.
    resolve_data_paths(cfg, PROJECT_ROOT)

    app = create_app(cfg)

    host: str = cfg.server.host
    port: int = cfg.server.port
    debug: bool = cfg.server.debug

    logger.info(
        "Starting dev claims backend on {host}:{port} (debug={debug})",
        host=host,
        port=port,
        debug=debug,
    )

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
