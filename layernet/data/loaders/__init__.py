"""Built-in sample source loaders.

Importing this package registers every built-in source.
"""

from . import static, uniform  # noqa: F401

__all__ = ["static", "uniform"]
