"""Commit a previously proposed configuration snapshot."""

from __future__ import annotations

import logging

from .config import ConfigStore, load_payload
from .errors import STATUS_UPDATED, PersistenceError

logger = logging.getLogger(__name__)


def apply(store: ConfigStore, payload: str | bytes) -> str:
    """Replace the live configuration with payload and save it.

    The in-memory replacement happens before the write, so it stands even
    when saving raises PersistenceError.
    """
    config = load_payload(payload, store.config)
    store.replace(config)
    try:
        store.save()
    except PersistenceError as exc:
        logger.error("Error saving config: %s", exc)
        raise
    logger.info("Updated config at %s", store.path)
    return STATUS_UPDATED
