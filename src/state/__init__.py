from .runtime import RuntimeDeps
from .upstream import UpstreamState
from .settings import AppSettings

__all__ = ["AppSettings", "RuntimeDeps", "UpstreamState"]
