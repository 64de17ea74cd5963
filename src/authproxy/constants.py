"""
Application-wide constants for authproxy.

Defaults shared by the ACP and GAP proxy integrations.
"""

# Proxy defaults
DEFAULT_PROXY_URL = "http://localhost:9443"
PROXY_URL_SCHEMES = ("http", "https")

# CA certificate lives under ~/.config/<product>/
CA_CERT_CONFIG_DIR = ".config"
CA_CERT_FILENAME = "ca.crt"

# Where users install the proxy from
INSTALL_URL_TEMPLATE = "https://github.com/mikekelly/{product}"

# Dotenv file read from the current working directory
DEFAULT_ENV_FILE = ".env"

# Network
DEFAULT_TIMEOUT_SECONDS = 30
PROXY_AUTHORIZATION_HEADER = "Proxy-Authorization"

# Token masking
MASKED_TOKEN_VISIBLE_CHARS = 4

# Logging
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5
