DB_NAME = "videotube"

API_PREFIX = "/api/v1"

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"

JWT_ALGORITHM = "HS256"
BCRYPT_ROUNDS = 10
