TEST_API_KEY = "test-roblox-api-key"
TEST_GAME_SECRET = "test-game-secret"
