"""Environment-driven settings and session token discovery.

Every value can be overridden through the environment (or a ``.env`` file
when running the ``aoc-fetch`` command):

``AOC_CACHE_DIR``   where inputs are cached, defaults to ``~/.aoc``
``AOC_USER_AGENT``  User-Agent sent with every request
``AOC_TIMEOUT``     request timeout in seconds, defaults to 30

The session token is read from ``$TOKEN`` or ``$AOC_TOKEN``, falling back to
a ``tokenfile`` in the working directory or any of its parents.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional, Self

from .errors import ConfigError, MissingTokenError

TOKEN_ENV_VARS: Final = ("TOKEN", "AOC_TOKEN")
TOKENFILE_NAME: Final = "tokenfile"

DEFAULT_USER_AGENT: Final = "aoc-inputs (+https://pypi.org/project/aoc-inputs/)"
DEFAULT_TIMEOUT: Final = 30.0


def default_cache_dir() -> Path:
    return Path.home() / ".aoc"


def _timeout_from_env() -> float:
    value = os.getenv("AOC_TIMEOUT")
    if not value:
        return DEFAULT_TIMEOUT

    try:
        timeout = float(value)
    except ValueError:
        raise ConfigError(f"AOC_TIMEOUT must be a number of seconds, got {value!r}") from None
    if not timeout > 0:
        raise ConfigError(f"AOC_TIMEOUT must be positive, got {value!r}")
    return timeout


@dataclass(frozen=True, slots=True)
class Settings:
    cache_dir: Path
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> Self:
        cache_dir = os.getenv("AOC_CACHE_DIR")
        return cls(
            cache_dir=Path(cache_dir).expanduser() if cache_dir else default_cache_dir(),
            user_agent=os.getenv("AOC_USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=_timeout_from_env(),
        )


def find_tokenfile(start: Optional[Path] = None) -> Optional[Path]:
    """Find a ``tokenfile`` in *start* (the cwd by default), or search upwards."""

    path = (start or Path.cwd()).resolve()
    for directory in (path, *path.parents):
        candidate = directory / TOKENFILE_NAME
        if candidate.is_file():
            return candidate
    return None


def find_token(start: Optional[Path] = None) -> str:
    for var in TOKEN_ENV_VARS:
        token = os.getenv(var)
        if token:
            return token

    tokenfile = find_tokenfile(start)
    if tokenfile is not None:
        try:
            token = tokenfile.read_text(encoding="utf-8").rstrip()
        except OSError:
            token = ""
        if token:
            return token

    raise MissingTokenError()
