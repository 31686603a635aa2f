import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .errors import CacheError

logger = logging.getLogger(__name__)


class InputCache:
    """Puzzle inputs on disk, one file per day under a directory per year.

    Files are read and written without newline translation so the cached text
    is exactly what the server sent.
    """

    __slots__ = ("_root",)

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def year_dir(self, year: int) -> Path:
        return self._root / str(year)

    def path_for(self, year: int, day: int) -> Path:
        return self.year_dir(year) / f"day{day:02}.txt"

    def ensure_year_dir(self, year: int) -> Path:
        path = self.year_dir(year)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise CacheError(f"Could not create cache directory {path}: {err}") from err
        return path

    def read(self, year: int, day: int) -> Optional[str]:
        path = self.path_for(year, day)
        if not path.exists():
            logger.debug("cache miss %s", path)
            return None

        logger.debug("cache hit %s", path)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as err:
            raise CacheError(f"Could not read cached input {path}: {err}") from err

    def write(self, year: int, day: int, text: str) -> Path:
        path = self.path_for(year, day)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # a failed write never leaves a partial input behind
            fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=path.name + ".", suffix=".part")
            try:
                with open(fd, "w", encoding="utf-8", newline="") as f:
                    f.write(text)
                os.replace(tmp, path)
            except OSError:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as err:
            raise CacheError(f"Could not write cached input {path}: {err}") from err

        logger.info("Cached %d characters of input at %s", len(text), path)
        return path
