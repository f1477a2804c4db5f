import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24  # 1 Day
DEFAULT_REFRESH_TOKEN_EXPIRE_MINUTES = 60 * 24 * 10  # 10 Day
DEFAULT_PORT = 8000
DEFAULT_ENVIRONMENT = "development"
DEFAULT_SUPABASE_BUCKET = "media"
DEFAULT_TEMP_UPLOAD_DIR = os.path.join("public", "temp")

MONGODB_URI = os.getenv("MONGODB_URI")
if not MONGODB_URI:
    raise RuntimeError("MONGODB_URI environment variable is missing! Set it in your .env file.")
MONGODB_URI = MONGODB_URI.rstrip("/")

ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET")
REFRESH_TOKEN_SECRET = os.getenv("REFRESH_TOKEN_SECRET")
if not all([ACCESS_TOKEN_SECRET, REFRESH_TOKEN_SECRET]):
    raise RuntimeError("Token secret environment variable is missing! Set it in your .env file.")

ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES))
REFRESH_TOKEN_EXPIRE_MINUTES = int(os.getenv("REFRESH_TOKEN_EXPIRE_MINUTES", DEFAULT_REFRESH_TOKEN_EXPIRE_MINUTES))

PORT = int(os.getenv("PORT", DEFAULT_PORT))
ENVIRONMENT = os.getenv("ENVIRONMENT", DEFAULT_ENVIRONMENT)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")]

SUPABASE_PROJECT_URL = os.getenv("SUPABASE_PROJECT_URL")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
if not all([SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY]):
    raise RuntimeError("SUPABASE related environment variable is missing! Set it in your .env file.")
SUPABASE_BUCKET = os.getenv("SUPABASE_BUCKET", DEFAULT_SUPABASE_BUCKET)

TEMP_UPLOAD_DIR = os.getenv("TEMP_UPLOAD_DIR", DEFAULT_TEMP_UPLOAD_DIR)
