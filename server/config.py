# server/config.py

import os
import logging
from dotenv import load_dotenv


load_dotenv()


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/app.db")
APP_ENV = os.getenv("APP_ENV", "development")
SQL_ECHO = os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def is_production() -> bool:
    return APP_ENV == "production"


def setup_logging():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
