"""Dependency wiring for the API service."""
from __future__ import annotations

import logging
import threading
from typing import Optional

from fastapi import HTTPException

from sea_router.core.config import get_config
from sea_router.core.errors import GraphDataError
from sea_router.routing.router import SeaRouter

logger = logging.getLogger(__name__)

_router: Optional[SeaRouter] = None
_router_lock = threading.Lock()


def get_router() -> SeaRouter:
    """Build the shared router on first use; later calls return the same instance."""
    global _router
    if _router is None:
        with _router_lock:
            if _router is None:
                cfg = get_config()
                logger.info(f"[ROUTER] Loading graph from {cfg.graph_path()}")
                try:
                    _router = SeaRouter.from_config(cfg)
                except GraphDataError as e:
                    logger.error(f"[ROUTER] Graph unavailable: {e}")
                    raise HTTPException(status_code=503, detail=str(e)) from e
    return _router


def set_router(router: Optional[SeaRouter]) -> None:
    """Install a prebuilt router (or clear it so the next request reloads)."""
    global _router
    with _router_lock:
        _router = router
