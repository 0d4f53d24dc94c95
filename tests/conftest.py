"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path so `tasknote` imports without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
