"""Registry bootstrap (import side-effect)."""
from .api import set_registry
from ._bootstrap import build_registry
from .attributes import standard as _standard  # noqa: F401  registers built-in attributes

set_registry(build_registry())
