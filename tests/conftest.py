import sys, os

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tests.helpers import FixedGenerator, fill_row

__all__ = [
    "FixedGenerator",
    "fill_row",
]
