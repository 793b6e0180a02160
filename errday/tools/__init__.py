"""errday.tools package

Developer utilities (art survey).

Keep this package's __init__ free of eager imports to avoid side-effects at
import time (module execution via `python -m ...`).
"""

__all__: list[str] = []
