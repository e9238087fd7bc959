# Constants
DEFAULT_FILE_SIZE = "10"  # MB when no suffix is given
DEFAULT_TRIALS = 10
DEFAULT_PROTOCOL = "https"
DEFAULT_REGION = "us-east-1"
DOWNLOAD_CHUNK_SIZE = 65536
PRESIGNED_URL_EXPIRATION = 3600  # seconds

BYTES_PER_MB = 1024 * 1024
NANOSECONDS_PER_SECOND = 1_000_000_000
P90_PERCENT = 90

# Credential fallbacks
ACCESS_KEY_ENV_VAR = "S3_ACCESS_KEY"
SECRET_KEY_ENV_VAR = "S3_SECRET_KEY"
SESSION_TOKEN_ENV_VAR = "S3_SESSION_TOKEN"
