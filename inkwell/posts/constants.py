# Posts module constants

# Error messages
POST_NOT_FOUND = "Post not found"
INSUFFICIENT_PERMISSIONS = "Only the author can modify this post"
INVALID_IMAGE_URL = "Invalid URL format"

# Validation
MIN_TITLE_LENGTH = 1
MAX_TITLE_LENGTH = 200
MAX_SLUG_LENGTH = 255
MAX_CONTENT_LENGTH = 200_000
MAX_TAGS = 20
MAX_TAG_LENGTH = 50

# Reading time
WORDS_PER_MINUTE = 200
MIN_READING_TIME = 1
