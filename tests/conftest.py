"""
Pytest configuration for gutility tests.
Adds src/ (for `import gutility`) and tests/ (for `import test_fixtures`) to sys.path
so the suite runs without an install.
"""
import sys
from pathlib import Path

tests_path = Path(__file__).parent
src_path = tests_path.parent / "src"
for path in (src_path, tests_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
