"""skill-sync: Mirror a canonical skills directory into agent skill targets."""

from __future__ import annotations

import logging

__version__ = "0.1.0"
__license__ = "MIT"

# Library code logs through ``logging.getLogger(__name__)``; the CLI decides
# whether anything is actually emitted.
logging.getLogger(__name__).addHandler(logging.NullHandler())
