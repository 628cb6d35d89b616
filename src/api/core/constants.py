API_VERSION_HEADER = "X-Rank-Relay-Version"
REQUEST_ID_HEADER = "X-Request-ID"

# Shared secret sent by the game server on privileged calls
GAME_AUTH_HEADER = "x-game-auth"

# Open Cloud authentication
CLOUD_API_KEY_HEADER = "x-api-key"

SERVICE_NAME = "rank-relay"

# Paths that are not worth a request log line
SKIP_LOGGING_PATHS = ["/health/liveness"]
