# config.py
"""
Application settings read from the environment (and a local .env file).
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Agreement numbering: <prefix>-<year>-<sequence>
AGREEMENT_NUMBER_PREFIX = os.getenv("AGREEMENT_NUMBER_PREFIX", "CHIOMA")
AGREEMENT_NUMBER_WIDTH = 4

# Listing
AGREEMENT_LIST_DEFAULT_LIMIT = int(os.getenv("AGREEMENT_LIST_DEFAULT_LIMIT", "10"))
AGREEMENT_LIST_MAX_LIMIT = int(os.getenv("AGREEMENT_LIST_MAX_LIMIT", "100"))

# Auth (token verification only; tokens are issued elsewhere)
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

CORS_ORIGINS = [o for o in os.getenv("CORS_ORIGINS", "").split(",") if o]
