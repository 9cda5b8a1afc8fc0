# Ensures project root is importable for tests (so 'presentation', 'services', etc. can be imported)
# and lets Qt tests run headless.
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
