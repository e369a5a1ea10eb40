"""LazyPLCNext: find PLCnext Engineer projects and open them in the right IDE."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
