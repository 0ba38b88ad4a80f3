from __future__ import annotations

import argparse
import importlib
import sys
from functools import partial
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv
from werkzeug.security import generate_password_hash

from config import get_settings_module

from src.samia_suite.samia_suite.database.bootstrap import seed_directory
from src.samia_suite.samia_suite.database.connection import DBConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the default account directory.")
    parser.add_argument("--reset", action="store_true", help="drop the current directory and restore the defaults")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    method = getattr(settings, "PASSWORD_HASH_METHOD", "scrypt")

    count = seed_directory(db_config, hash_password=partial(generate_password_hash, method=method), reset=args.reset)
    print(f"OK: Directory ready -> {DBConfig.from_mapping(db_config).describe()} (accounts={count})")


if __name__ == "__main__":
    main()
