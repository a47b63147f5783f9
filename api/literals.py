"""API-related constants and literals."""

# API Endpoints
API_PREFIX = "/api"
BOOKS_BASE_PATH = f"{API_PREFIX}/books"
ME_BASE_PATH = f"{API_PREFIX}/me"
CATALOG_BASE_PATH = f"{API_PREFIX}/catalog"
AUTH_BASE_PATH = "/auth"
HEALTH_ENDPOINT = "/health"

# Client routes the OAuth callback redirects to
CLIENT_APP_PATH = "/app"
CLIENT_LOGIN_PATH = "/login"

# OAuth state cookie
OAUTH_STATE_COOKIE = "bookshelf_oauth_state"
OAUTH_STATE_MAX_AGE = 10 * 60

# Catalog query limits
MIN_LIMIT = 1
MAX_LIMIT = 20

# Error code for unexpected failures
ERROR_INTERNAL = "internal_error"
