# Auth module constants

# Error messages
USER_ALREADY_EXISTS = "User already exists"
TOKEN_MISSING = "Authentication token not found"
TOKEN_NOT_VALID = "Token is invalid or has expired"

# Validation
MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_LENGTH = 72
MAX_NAME_LENGTH = 255
