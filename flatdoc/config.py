import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = Path(os.getenv("FLATDOC_DATA_DIR", str(BASE_DIR / "database")))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False


class TestConfig(Config):
    TESTING = True
