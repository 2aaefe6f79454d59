from src.state import UpstreamState

from .upstream import UpstreamSession
from .connector import UpstreamConnector

__all__ = ["UpstreamConnector", "UpstreamSession", "UpstreamState"]
