import os

# Identity
PROGRAM_NAME = "questmap"

# Export configuration
DEFAULT_TITLE = os.getenv("QUESTMAP_TITLE", "Untitled")
DEFAULT_ENCODING = "utf-8"

# Logging configuration
LOG_LEVEL = os.getenv("QUESTMAP_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
