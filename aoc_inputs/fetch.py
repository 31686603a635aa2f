from typing import Final, Optional
import logging

from datetime import datetime, timedelta, timezone

import requests

from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .errors import FetchError

logger = logging.getLogger(__name__)

# puzzles unlock at midnight EST
AOC_TZ: Final = timezone(timedelta(hours=-5))

BASE_URL: Final = "https://adventofcode.com"


def input_url(year: int, day: int) -> str:
    return f"{BASE_URL}/{year}/day/{day}/input"


def unlocks_at(year: int, day: int) -> datetime:
    return datetime(year, 12, day, tzinfo=AOC_TZ)


def is_released(year: int, day: int, now: Optional[datetime] = None) -> bool:
    if now is None:
        now = datetime.now(timezone.utc)
    return unlocks_at(year, day) <= now


def today() -> int:
    utc = datetime.now(timezone.utc)
    return min(utc.astimezone(AOC_TZ).day, 25)


def current_year() -> int:
    """The most recent Advent of Code event, i.e. last year until December."""

    now = datetime.now(timezone.utc).astimezone(AOC_TZ)
    return now.year if now.month == 12 else now.year - 1


def redact(token: str) -> str:
    return "..." + token[-4:]


def get_input(
    session: requests.Session,
    year: int,
    day: int,
    token: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    url = input_url(year, day)
    logger.info("Fetching %s:%s token=%s", year, day, redact(token))

    try:
        r = session.get(
            url,
            cookies=dict(session=token),
            headers={"User-Agent": user_agent},
            timeout=timeout,
        )
    except requests.RequestException as err:
        raise FetchError(f"Request to {url} failed: {err}", url) from err

    with r:
        try:
            r.raise_for_status()
        except requests.HTTPError as err:
            logger.error("got %s status code token=%s", r.status_code, redact(token))
            raise FetchError(f"HTTP {r.status_code} at {url}", url, r.status_code) from err

        if not 200 <= r.status_code < 300:
            logger.error("got %s status code token=%s", r.status_code, redact(token))
            raise FetchError(f"HTTP {r.status_code} at {url}", url, r.status_code)

        # require utf8 response
        try:
            return r.content.decode("utf8")
        except UnicodeDecodeError as err:
            raise FetchError(
                f"Response from {url} is not valid UTF-8", url, r.status_code
            ) from err
