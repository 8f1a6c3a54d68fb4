import os
from pathlib import Path
from typing import Iterable, List


def existing_files(paths: Iterable) -> List[Path]:
    """Keep only the paths that exist on disk, preserving order."""
    return [Path(p) for p in paths if os.path.exists(p)]
