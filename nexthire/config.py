# ========================================
# nexthire/config.py - ENVIRONMENT SETTINGS
# ========================================

import os
from pathlib import Path
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load .env from the project root, falling back to the working directory
env_path = Path(__file__).resolve().parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
else:
    load_dotenv()

# 1. DATABASE
DB_USER = os.getenv("DB_USER", "")
DB_PASS = os.getenv("DB_PASS", "")
DB_HOST = os.getenv("DB_HOST", "cluster0.yqmtelq.mongodb.net")
DATABASE_NAME = os.getenv("DB_NAME", "nextHire")
JOBS_COLLECTION = "jobs"
BIDS_COLLECTION = "bids"

# 2. THE KEYS
SECRET_KEY = os.getenv("ACCESS_TOKEN", "nexthire_dev_secret_CHANGE_THIS")
ALGORITHM = "HS256"
TOKEN_EXPIRE_DAYS = int(os.getenv("TOKEN_EXPIRE_DAYS", "365"))
TOKEN_COOKIE_NAME = "token"

# 3. SERVER
ENVIRONMENT = os.getenv("NODE_ENV", "development")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:5174").split(",")
    if o.strip()
]


def get_mongo_uri() -> str:
    """MONGO_URI wins; otherwise build the Atlas URI from DB_USER / DB_PASS."""
    uri = os.getenv("MONGO_URI")
    if uri:
        return uri
    return (
        f"mongodb+srv://{quote_plus(DB_USER)}:{quote_plus(DB_PASS)}@{DB_HOST}/"
        "?retryWrites=true&w=majority&appName=Cluster0"
    )


def is_production() -> bool:
    return ENVIRONMENT == "production"
