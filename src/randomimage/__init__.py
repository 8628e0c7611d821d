"""randomimage: HTTP redirects to random image URLs grouped by category.

``randomimage.server.create_app`` builds the ASGI application.
``RandomImageError`` and ``ErrorCode`` are the failures every route maps to
a JSON envelope.
"""

from __future__ import annotations

import warnings
from importlib.metadata import PackageNotFoundError, version

from randomimage.errors import ErrorCode, RandomImageError

DISTRIBUTION_NAME = "randomimage"
FALLBACK_VERSION = "0.0.0+unknown"

try:
    __version__ = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    # Running from a source checkout without installed metadata
    warnings.warn(
        f"Package metadata for {DISTRIBUTION_NAME!r} not found; "
        f"using fallback version {FALLBACK_VERSION!r}.",
        RuntimeWarning,
        stacklevel=2,
    )
    __version__ = FALLBACK_VERSION

__all__ = ["DISTRIBUTION_NAME", "ErrorCode", "RandomImageError", "__version__"]
