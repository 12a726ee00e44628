from .config import EXPORTS_DIR
from pathlib import Path

def ensure_data_dirs():
    for p in [EXPORTS_DIR]:
        Path(p).mkdir(parents=True, exist_ok=True)
