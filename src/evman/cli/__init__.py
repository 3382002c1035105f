"""CLI package.

The ``cli`` sub-package contains the Click application. It should
import only from the public API of the parent package and the parser
and error modules, never from command internals.
"""
from __future__ import annotations
