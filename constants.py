import os

from dotenv import load_dotenv

load_dotenv()

TOKBOX_API_KEY_ENV = "TOKBOX_API_KEY"
TOKBOX_SECRET_ENV = "TOKBOX_SECRET"
TOKBOX_DASHBOARD_URL = "https://tokbox.com/account/#/"

MEDIA_MODE = os.getenv("MEDIA_MODE", "routed")

CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
CORS_ALLOW_METHODS = ["OPTIONS", "POST", "GET", "PUT"]
CORS_ALLOW_HEADERS = [
    "Access-Control-Allow-Origin",
    "Access-Control-Allow-Methods",
    "Origin",
    "X-Requested-With",
    "Content-Type",
    "Accept",
    "Vary",
]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", None)


def get_provider_credentials():
    """Read the provider key pair at call time so a late .env or test override is honoured."""
    return os.getenv(TOKBOX_API_KEY_ENV), os.getenv(TOKBOX_SECRET_ENV)
