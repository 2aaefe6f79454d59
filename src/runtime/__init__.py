"""Runtime package.

Keep this module dependency-light: importing `src.runtime.*` from unit tests
should not open any network connection.
"""

__all__: list[str] = []
