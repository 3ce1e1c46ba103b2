"""
Application constants.

Values that are fixed by design and not read from the environment.
"""

# Session configuration
SESSION_DURATION_HOURS = 24
SESSION_TOKEN_BYTES = 32  # 32 bytes = 256 bits, 64 hex chars

# Where the HTTP layer carries the session token
SESSION_COOKIE_NAME = "sessionId"
SESSION_HEADER_NAME = "x-session-id"

# Default admin principal, seeded on first initialization.
# Operators must rotate this password after install.
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "ChangeThisPassword123!"

# Image references accepted from the upload collaborator
ALLOWED_IMAGE_EXTENSIONS = frozenset({"jpeg", "jpg", "png", "gif", "webp"})
MAX_IMAGE_REFERENCE_LENGTH = 255

# Field limits
MAX_EMAIL_LENGTH = 255
MAX_SECRET_BYTES = 72  # bcrypt only uses the first 72 bytes
