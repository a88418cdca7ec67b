from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.common.datetime_utils import now_local
from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.database.seed import seed_demo_data

log = logging.getLogger("seed_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(backend="mysql", db_config=db_config)
    today = now_local(getattr(settings, "TIMEZONE", None)).date()
    if seed_demo_data(container, today=today):
        log.info("seeded %s@%s/%s", db_config.get("user"), db_config.get("host"), db_config.get("database"))
    else:
        log.info("users already present, nothing seeded")


if __name__ == "__main__":
    main()
