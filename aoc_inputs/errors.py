from typing import Optional


class AocError(Exception):
    __slots__ = ()


class MissingTokenError(AocError):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(
            "Could not read token from $TOKEN or $AOC_TOKEN, or find a ./tokenfile "
            "in this directory or any parent. Set the token in one of these "
            "locations or pass it explicitly"
        )


class InvalidYearError(AocError):
    __slots__ = ()

    def __init__(self, year: int) -> None:
        super().__init__(f"Year must be between 1 and 2999, got {year}")


class InvalidDayError(AocError):
    __slots__ = ()


class DayZeroError(InvalidDayError):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("Advent of Code problems are 1-indexed, day 0 does not exist")


class DayOutOfBoundsError(InvalidDayError):
    __slots__ = ()

    def __init__(self, day: int) -> None:
        super().__init__(f"Advent of Code stops after the 25th, got day {day}")


class NotYetReleasedError(AocError):
    __slots__ = ()

    def __init__(self, year: int, day: int) -> None:
        super().__init__(
            f"Refusing to fetch input for {year} day {day}, as it has not yet been released"
        )


class FetchError(AocError):
    __slots__ = "status", "url"

    def __init__(self, message: str, url: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class CacheError(AocError):
    __slots__ = ()


class ConfigError(AocError):
    __slots__ = ()
