from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_dashboard.employee_dashboard.core.logging import configure_logging
from src.employee_dashboard.employee_dashboard.database.bootstrap import apply_seed_sql, ensure_demo_users
from src.employee_dashboard.employee_dashboard.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    seed_path = REPO_ROOT / "database" / "seed.sql"
    apply_seed_sql(db_config, seed_path=seed_path)
    ensure_demo_users(db_config)

    print(
        "OK: Seeded database -> "
        f"{DBConfig.from_dict(db_config).describe()}"
    )


if __name__ == "__main__":
    main()
