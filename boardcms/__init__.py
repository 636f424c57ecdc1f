"""Top-level package for boardcms.

This package normalizes, validates, and merges the locale-scoped marketing
content of a boarding-house site. The main access entry point is
`ContentService`.
"""

from .service import ContentService

__all__ = ["ContentService", "__version__"]

__version__ = "0.1.0"
