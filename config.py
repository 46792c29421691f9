import os
import sys

from dotenv import load_dotenv

from enums.runtime_environment import RuntimeEnvironment

# Load .env but don't override existing environment variables
# This allows test runs to set RUNTIME_ENVIRONMENT=TEST before import
load_dotenv(".env", override=False)

# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
try:
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(os.environ.get("RUNTIME_ENVIRONMENT", RuntimeEnvironment.DEV.value))
except ValueError as e:
    valid_values = [env.value for env in RuntimeEnvironment]
    print(f"\n ERROR: Invalid RUNTIME_ENVIRONMENT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('RUNTIME_ENVIRONMENT', '(not set)')}", file=sys.stderr)
    print(f"\nAdd to .env: RUNTIME_ENVIRONMENT={valid_values[0]}\n", file=sys.stderr)
    sys.exit(1)

# Hosted Postgres backend
DB_USER = os.environ.get("DB_USER", "postgres")
DB_PASS = os.environ.get("DB_PASS", "")
DB_HOST = os.environ.get("DB_HOST", "localhost")
DB_NAME = os.environ.get("DB_NAME", "postgres")

# Parse DB_PORT with error handling
try:
    DB_PORT = int(os.environ.get("DB_PORT", "5432"))
    if DB_PORT <= 0:
        raise ValueError(f"DB_PORT must be positive (got: {DB_PORT})")
except ValueError as e:
    print(f"\n ERROR: Invalid DB_PORT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Positive integer (e.g., 5432, 6543)", file=sys.stderr)
    print(f"Current value: {os.environ.get('DB_PORT', '(not set)')}\n", file=sys.stderr)
    sys.exit(1)

# A full DB_URL takes precedence over the individual DB_* parts
DB_URL = os.environ.get("DB_URL") or (
    f"postgresql+asyncpg://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)
DB_ECHO = os.environ.get("DB_ECHO", "false") == "true"

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_DIR = os.environ.get("LOG_DIR", "logs")
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"
# Keep production logs longer unless configured explicitly
_default_retention_days = "30" if RUNTIME_ENVIRONMENT == RuntimeEnvironment.PROD else "7"
LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", _default_retention_days))
