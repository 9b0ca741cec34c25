import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

REPLICATE_API_KEY = os.getenv("REPLICATE_API_KEY", "")
REPLICATE_BASE_URL = os.getenv("REPLICATE_BASE_URL", "https://api.replicate.com/v1")
REPLICATE_POLL_INTERVAL = float(os.getenv("REPLICATE_POLL_INTERVAL", "1.0"))
REPLICATE_MAX_ATTEMPTS = int(os.getenv("REPLICATE_MAX_ATTEMPTS", "30"))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./unoform.db")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
