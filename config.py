import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


# 봇이 다루는 세대/저장 포맷 (Sword/Shield)
GENERATION = 8
SUPPORTED_FORMAT = "PK8"

# 링크 코드 범위
TRADE_CODE_MIN = 0
TRADE_CODE_MAX = 99_999_999

# 코드 미지정 시 무작위로 뽑는 범위
RANDOM_CODE_MIN = int(os.environ.get("LINKTRADE_RANDOM_CODE_MIN", "8180"))
RANDOM_CODE_MAX = int(os.environ.get("LINKTRADE_RANDOM_CODE_MAX", "8199"))

# 일반 사용자 대기열 최대 길이 (sudo 는 제한 없음)
MAX_QUEUE_SIZE = int(os.environ.get("LINKTRADE_MAX_QUEUE_SIZE", "30"))

# 합법성 검사 강제 여부
ENFORCE_LEGALITY = _env_flag("LINKTRADE_ENFORCE_LEGALITY", True)
