# Portal
DEFAULT_PORTAL = "https://www.arcgis.com/sharing/rest"
GENERATE_TOKEN_PATH = "generateToken"
OAUTH2_TOKEN_PATH = "oauth2/token"

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_ACCEPT = "Accept"

# Request defaults
DEFAULT_TIMEOUT = 30.0
UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR_CODE"

# Seconds before expiry at which a session refreshes its token
TOKEN_REFRESH_MARGIN = 60

# SSL
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

USER_AGENT_PREFIX = "ArcGIS.Rest.Python"
