"""Output schemas for API commands.

Importing this package registers every domain's schemas.
"""

from . import config, docs, engine  # noqa: F401
