"""
Smoke run: connect to the data directory and exercise a ``users`` collection.

    python -m flatdoc
"""
import logging
from pathlib import Path
from typing import Optional

from .config import Config
from .storage.collection import model
from .storage.json_store import Store

logger = logging.getLogger(__name__)

USERS_SCHEMA = {
    "name": "",
    "email": "",
    "password": "",
}


def connect(base_dir: Path, store: Optional[Store] = None) -> Store:
    """Bind ``store`` (a fresh one by default) to ``base_dir`` and connect it."""
    store = store or Store()
    store.set_base_dir(base_dir)
    store.connect()
    return store


def main(base_dir: Optional[Path] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = Store()
    users = model(store, "users", USERS_SCHEMA)
    connect(base_dir or Config.DATA_DIR, store)

    logger.info("Users: %s", users.find_many({}))
    users.create({
        "email": "angelhdz@gmail.com",
        "name": "Angel",
        "password": "123456",
    })
    logger.info("Found: %s", users.find_one({"email": "angelhdz@gmail.com"}))
    return 0
