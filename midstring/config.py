import os

LOG_LEVEL = os.getenv("MIDSTRING_LOG_LEVEL", "INFO").upper()
MAX_KEY_LENGTH = int(os.getenv("MIDSTRING_MAX_KEY_LENGTH", "512"))
