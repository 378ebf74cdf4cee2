"""pytest configuration for the video generator relay."""

import os
import sys
from pathlib import Path

os.environ["ENVIRONMENT"] = "development"
os.environ.setdefault("MAKE_WEBHOOK_URL", "https://hook.example.test/webhook")
os.environ.setdefault("DD_TRACE_ENABLED", "false")

# The service is laid out as top-level modules, run from its own directory
root = Path(__file__).parent.parent
for path in (root / "services" / "generate-api", root / "services" / "common" / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
