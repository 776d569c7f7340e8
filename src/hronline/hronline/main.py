from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from .attendance.policy import WorkdayPolicy
from .config import get_settings_module
from .container import Container, build_container, build_store
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger("hronline")
    root.handlers.clear()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def create_app() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    backend = str(getattr(settings, "STORE_BACKEND", "memory")).lower()
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.debug("settings=%s backend=%s", settings_module, backend)

    if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

    policy = WorkdayPolicy.from_strings(
        getattr(settings, "WORK_START", "08:00"),
        getattr(settings, "WORK_END", "17:00"),
    )
    return build_container(
        store=build_store(backend=backend, db_config=db_config),
        policy=policy,
        max_records=int(getattr(settings, "MAX_RECORDS", 100)),
    )
