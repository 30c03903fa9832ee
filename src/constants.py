"""Constants used in business logic."""

# Name used when configuration does not provide one
DEFAULT_SERVICE_NAME = "quota-gate"

# Default configuration file name
DEFAULT_CONFIGURATION_FILE = "quota-gate.yaml"

# Quota value meaning that no usage accounting is enforced
UNLIMITED_QUOTA = 0

# Largest quota that fits the int column of the credentials table
MAX_QUOTA = 2**31 - 1

# Prefix that might be used by clients in the Authorization header
BEARER_PREFIX = "Bearer "

# PostgreSQL connection constants
# See: https://www.postgresql.org/docs/current/libpq-connect.html#LIBPQ-CONNECT-SSLMODE
POSTGRES_DEFAULT_SSL_MODE = "prefer"
# See: https://www.postgresql.org/docs/current/libpq-connect.html#LIBPQ-CONNECT-GSSENCMODE
POSTGRES_DEFAULT_GSS_ENCMODE = "prefer"
POSTGRES_DEFAULT_POOL_MIN_SIZE = 1
POSTGRES_DEFAULT_POOL_MAX_SIZE = 25

# credential store backends
STORE_TYPE_SQLITE = "sqlite"
STORE_TYPE_POSTGRES = "postgres"

# info string used to derive the token encryption key from configured secret
TOKEN_CIPHER_KDF_INFO = b"quota-gate token encryption"

# default value for token when no Authorization header is provided
NO_TOKEN = ""

# environment variable with path to configuration file, used by Uvicorn workers
CONFIG_PATH_ENV_VAR = "QUOTA_GATE_CONFIG_PATH"
