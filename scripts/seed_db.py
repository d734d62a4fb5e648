from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staffing_portal.staffing_portal.container import build_container, build_store
from src.staffing_portal.staffing_portal.database.seed import DEMO_USERS, ensure_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    # Seeding only makes sense against the persistent store.
    container = build_container(
        store=build_store(doc_store="mysql", db_config=db_config),
        default_candidate_password=settings.DEFAULT_CANDIDATE_PASSWORD,
    )
    ensure_demo_data(container)

    print(
        "OK: Seeded demo data -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )
    for email, password, user_type, _name, _manager in DEMO_USERS:
        print(f"  {user_type.value:<17} {email} / {password}")


if __name__ == "__main__":
    main()
