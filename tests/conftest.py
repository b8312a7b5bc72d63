import sys
from pathlib import Path
import os


# Ensure project src is on path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for p in (ROOT, SRC):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

# Keep tests on the in-memory store with no seed file
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("VERIFIED_ARTICLES_PATH", "")
os.environ.setdefault("STRICT_CACHE_LOOKUP", "false")
