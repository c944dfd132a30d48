from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from application.ports.complex_obs_handler import ComplexObsHandler
    from infrastructure.config import Settings

log = structlog.get_logger(__name__)


def create_complex_obs_handler(settings: Settings, logger: Any | None = None) -> ComplexObsHandler:
    """Instantiate the complex obs handler selected by COMPLEX_OBS_HANDLER in config."""
    handler = settings.complex_obs_handler

    if handler == "binary_data":
        from infrastructure.complex_obs_handlers.binary_data_handler import (  # noqa: PLC0415
            BinaryDataHandler,
        )

        log.info("complex_obs.factory", handler="binary_data", root=settings.complex_obs_dir)
        return BinaryDataHandler(
            root=settings.complex_obs_dir,
            storage_options=settings.complex_obs_storage_options,
            logger=logger,
        )

    msg = f"Unsupported COMPLEX_OBS_HANDLER: {handler!r}. Valid options: binary_data"
    raise ValueError(msg)
