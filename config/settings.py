from typing import Final
import os
from dotenv import load_dotenv

load_dotenv()

# =============================================
# GLOBAL SETTINGS
# Settings that apply to the entire service
# =============================================

DEBUG: Final[bool] = os.getenv("DEBUG", "0") == "1"

# Data source resolution strategy: auto | url | fields
# auto - SPRING_DATASOURCE_URL when set, otherwise MYSQL_* variables
DATASOURCE_STRATEGY: Final[str] = os.getenv("DATASOURCE_STRATEGY", "auto").strip().lower()

# Run SELECT 1 through the pool right after startup
DB_CHECK_ON_STARTUP: Final[bool] = os.getenv("DB_CHECK_ON_STARTUP", "0") == "1"
