# pyre-unsafe
"""Test context for importing bootkde modules."""

import os
import sys

sys.path.insert(
    0,
    os.path.abspath(os.path.join(os.path.dirname(__file__), "..")),
)

import bootkde  # noqa: F401, E402
from bootkde import _utils  # noqa: F401, E402
