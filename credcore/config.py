import os
from dotenv import load_dotenv
load_dotenv()

DEFAULT_COST = int(os.getenv("PASSWORD_DEFAULT_COST", "12"))
DEFAULT_SALT_LENGTH = int(os.getenv("PASSWORD_SALT_LENGTH", "16"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
