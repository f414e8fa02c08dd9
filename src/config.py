"""
Configuration module for Order Consolidator
Loads environment variables, default rule tables and export layout
"""
import os
import tempfile
from pathlib import Path
from dotenv import load_dotenv

# Get project root directory (parent of src/)
PROJECT_ROOT = Path(__file__).parent.parent

# Load environment variables from .env file (if exists - local dev only)
env_file = PROJECT_ROOT / '.env'
if env_file.exists():
    load_dotenv(env_file)

# ═══════════════════════════════════════════════════════════════════
# WRITABLE PATHS
# ═══════════════════════════════════════════════════════════════════

def get_writable_path(folder_name: str) -> str:
    """Get a writable path that works in all environments"""
    env_path = os.getenv(folder_name.upper() + '_FOLDER')
    if env_path:
        if os.path.isabs(env_path):
            path = Path(env_path)
        else:
            path = PROJECT_ROOT / env_path
    else:
        path = PROJECT_ROOT / folder_name

    # Read-only checkouts fall back to the temp directory
    if not path.exists():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except (PermissionError, OSError):
            path = Path(tempfile.gettempdir()) / 'order_consolidator' / folder_name
            path.mkdir(parents=True, exist_ok=True)

    return str(path)

# ═══════════════════════════════════════════════════════════════════
# CONFIGURATION VALUES
# ═══════════════════════════════════════════════════════════════════

# Courier written on every consolidated record
DEFAULT_COURIER = os.getenv('DEFAULT_COURIER', '한진택배')

# Ingestion
SUPPORTED_SOURCE_EXTENSIONS = os.getenv('SUPPORTED_SOURCE_EXTENSIONS', 'xlsx,xlsm,csv').split(',')
MAX_LOADER_WORKERS = int(os.getenv('MAX_LOADER_WORKERS', '4'))

# Rule tables edited by the user (JSON settings store)
RULES_FILE = os.getenv('RULES_FILE', str(PROJECT_ROOT / 'data' / 'rules.json'))

# Export
EXPORT_FOLDER = get_writable_path('exports')
EXPORT_SHEET_TITLE = os.getenv('EXPORT_SHEET_TITLE', '발주통합')
EXPORT_FILENAME_PREFIX = os.getenv('EXPORT_FILENAME_PREFIX', '통합발주서')

# Monitoring Configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_DIR = os.getenv('LOG_DIR', str(PROJECT_ROOT / 'logs'))
LOG_FILE_MAX_MB = int(os.getenv('LOG_FILE_MAX_MB', '10'))
LOG_FILE_BACKUP_COUNT = int(os.getenv('LOG_FILE_BACKUP_COUNT', '5'))
ENABLE_FILE_LOGGING = os.getenv('ENABLE_FILE_LOGGING', 'true').lower() == 'true'

# Re-export header row (matches the standard order form)
MASTER_HEADERS = [
    '수령인',
    '수령인 연락처',
    '우편번호',
    '주소',
    '배송메시지',
    '옵션',
    '수량',
    '택배사',
    '운송장번호',
]

# Column widths (characters) for the xlsx export, same order as MASTER_HEADERS
EXPORT_COLUMN_WIDTHS = [10, 15, 8, 40, 20, 25, 5, 10, 15]

# ═══════════════════════════════════════════════════════════════════
# DEFAULT RULE TABLES
# ═══════════════════════════════════════════════════════════════════

# Column synonyms per canonical field. Each sales channel names its
# columns differently; users extend these lists from the settings store.
DEFAULT_HEADER_MAPPING = {
    'receiver': ['수취인', '수취인명', '수령인', '수령인명', '받는분', '이름', '주문자명'],
    'contact': ['전화번호', '휴대폰', '휴대전화', '연락처', '수령인전화', '수령인핸드폰', '주문자연락처'],
    'postCode': ['우편번호', '수령인 우편번호'],
    'address': ['주소', '수령인 주소', '배송지'],
    'message': ['배송메시지', '배송메세지', '주문메시지', '배송요청사항', '비고'],
    'productName': ['상품명', '품명', '주문상품', '상품옵션', '옵션'],
    'quantity': ['수량', '주문수량', '개수'],
}

# Keyword -> standard product name. First keyword found in the raw text wins.
DEFAULT_PRODUCT_RULES = [
    ('반숙', '반숙란 30구'),
    ('구운', '구운란 30구'),
    ('훈제', '훈제란 30구'),
    ('동물복지', '동물복지 유정란 20구'),
]


def validate_config():
    """Validate that all required configuration is present"""
    errors = []

    if not DEFAULT_COURIER.strip():
        errors.append("DEFAULT_COURIER is empty")

    if len(EXPORT_COLUMN_WIDTHS) != len(MASTER_HEADERS):
        errors.append(
            f"EXPORT_COLUMN_WIDTHS has {len(EXPORT_COLUMN_WIDTHS)} entries, "
            f"expected {len(MASTER_HEADERS)}"
        )

    if MAX_LOADER_WORKERS < 1:
        errors.append("MAX_LOADER_WORKERS must be at least 1")

    if LOG_LEVEL.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        errors.append(f"LOG_LEVEL is not a valid level: {LOG_LEVEL}")

    if not EXPORT_SHEET_TITLE or len(EXPORT_SHEET_TITLE) > 31:
        errors.append("EXPORT_SHEET_TITLE must be 1-31 characters")

    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(errors))

    return True


if __name__ == "__main__":
    try:
        validate_config()
        print("[OK] Configuration validated successfully")
    except ValueError as e:
        print(f"[FAIL] Configuration validation failed:\n{e}")
