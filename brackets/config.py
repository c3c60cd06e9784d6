import logging
import os
from dotenv import load_dotenv

load_dotenv()

def parse_log_level(value, default="INFO"):
    level = (value or default).upper()
    # getLevelName отдает строку "Level X" для неизвестных уровней
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level

class Config:
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 8000))
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL = parse_log_level(os.getenv("LOG_LEVEL"))
    MAX_EXPRESSION_LENGTH = int(os.getenv("MAX_EXPRESSION_LENGTH", 10000))

config = Config()
