import os
from dotenv import load_dotenv

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# HTTP listener
HTTP_HOST = os.getenv("HTTP_HOST", "0.0.0.0")
HTTP_PORT = os.getenv("HTTP_PORT", "8080")
HTTP_SHUTDOWN_TIMEOUT = float(os.getenv("HTTP_SHUTDOWN_TIMEOUT", "10"))

# Fixed listener limits
HTTP_READ_TIMEOUT = 15
HTTP_MAX_HEADER_BYTES = 1 << 20

# Providers registered at boot (comma-separated names)
PROVIDERS = [name.strip() for name in os.getenv("PROVIDERS", "").split(",") if name.strip()]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE")  # Optional path; file logging disabled when unset
