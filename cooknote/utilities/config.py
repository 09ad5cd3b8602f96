"""Configuration management for the CookNote journal."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# AI analysis collaborator
AI_API_URL: Final[str] = os.getenv('COOKNOTE_AI_API_URL', 'http://localhost:8000/analyze')
AI_API_KEY: Final[str] = os.getenv('AI_API_KEY', '')
AI_BASE_URL: Final[str] = os.getenv('AI_BASE_URL', 'https://api-inference.modelscope.cn/v1')
AI_MODEL: Final[str] = os.getenv('AI_MODEL', 'Qwen/Qwen3-VL-235B-A22B-Instruct')
AI_TIMEOUT_SECONDS: Final[float] = float(os.getenv('AI_TIMEOUT_SECONDS', '60'))
USE_MOCK_AI: Final[bool] = os.getenv('COOKNOTE_USE_MOCK', 'False').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('COOKNOTE_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
