"""Fetch and cache Advent of Code puzzle inputs.

    from aoc_inputs import AoC

    with AoC(2020) as aoc:
        text = aoc.read_or_fetch(1)

Inputs are fetched once and served from ``~/.aoc/<year>/dayNN.txt`` afterwards.
"""

from pathlib import Path
from typing import Optional, Self

import requests

from . import fetch
from .cache import InputCache
from .config import Settings, find_token
from .errors import (
    AocError,
    CacheError,
    ConfigError,
    DayOutOfBoundsError,
    DayZeroError,
    FetchError,
    InvalidDayError,
    InvalidYearError,
    MissingTokenError,
    NotYetReleasedError,
)


class AoC:
    """Puzzle inputs for one year, read from the cache or fetched on a miss.

    *path* defaults to ``$AOC_CACHE_DIR`` or ``~/.aoc`` and *token* to the
    result of :func:`aoc_inputs.config.find_token`. A *session* passed in is
    owned by the caller and is left open by :meth:`close`.
    """

    __slots__ = "_year", "_token", "_cache", "_session", "_owns_session", "_settings"

    def __init__(
        self,
        year: int,
        path: Optional[str | Path] = None,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        if not (1 <= year < 3000):
            raise InvalidYearError(year)

        settings = settings or Settings.from_env()
        if token is None:
            token = find_token()

        cache = InputCache(path if path is not None else settings.cache_dir)
        cache.ensure_year_dir(year)

        self._year = year
        self._token = token
        self._cache = cache
        self._settings = settings
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    @property
    def year(self) -> int:
        return self._year

    @property
    def cache(self) -> InputCache:
        return self._cache

    def path_for(self, day: int) -> Path:
        """Where the input for *day* is cached, or would be."""
        return self._cache.path_for(self._year, day)

    def url_for(self, day: int) -> str:
        return fetch.input_url(self._year, day)

    def read_or_fetch(self, day: int) -> str:
        """Read the input for *day* from the cache, or fetch and cache it.

        Raises :class:`InvalidDayError` for days outside 1..=25,
        :class:`NotYetReleasedError` if the puzzle is still locked,
        :class:`FetchError` if the request fails and :class:`CacheError` if
        the cache cannot be read or written.
        """

        if day == 0:
            raise DayZeroError()
        if not (1 <= day <= 25):
            raise DayOutOfBoundsError(day)

        text = self._cache.read(self._year, day)
        if text is not None:
            return text

        if not fetch.is_released(self._year, day):
            raise NotYetReleasedError(self._year, day)

        text = fetch.get_input(
            self._session,
            self._year,
            day,
            self._token,
            timeout=self._settings.timeout,
            user_agent=self._settings.user_agent,
        )
        self._cache.write(self._year, day, text)
        return text


__all__ = [
    "AoC",
    "AocError",
    "CacheError",
    "ConfigError",
    "DayOutOfBoundsError",
    "DayZeroError",
    "FetchError",
    "InputCache",
    "InvalidDayError",
    "InvalidYearError",
    "MissingTokenError",
    "NotYetReleasedError",
    "Settings",
]
