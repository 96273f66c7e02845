"""Region and route constants plus the error type raised for HTTP error responses."""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class Region(str, Enum):
    """A server region."""

    BRASIL = "br1"
    EUROPE_NORTH_EAST = "eun1"
    EUROPE_WEST = "euw1"
    JAPAN = "jp1"
    KOREA = "kr"
    LATIN_AMERICA_NORTH = "la1"
    LATIN_AMERICA_SOUTH = "la2"
    MIDDLE_EAST = "me1"
    NORTH_AMERICA = "na1"
    OCEANIA = "oc1"
    PBE = "pbe1"
    SOUTH_EAST_ASIA = "sg2"
    # Deprecated aliases: these servers were merged into the SEA server.
    PHILIPPINES = "sg2"
    SINGAPORE = "sg2"
    THAILAND = "sg2"
    RUSSIA = "ru"
    TURKEY = "tr1"
    TAIWAN = "tw2"
    VIETNAM = "vn2"

    def __str__(self) -> str:
        return self.value


class Route(str, Enum):
    """The regional route a server region belongs to."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"

    def __str__(self) -> str:
        return self.value


REGIONS: tuple[Region, ...] = (
    Region.BRASIL,
    Region.EUROPE_NORTH_EAST,
    Region.EUROPE_WEST,
    Region.JAPAN,
    Region.KOREA,
    Region.LATIN_AMERICA_NORTH,
    Region.LATIN_AMERICA_SOUTH,
    Region.NORTH_AMERICA,
    Region.MIDDLE_EAST,
    Region.OCEANIA,
    Region.PBE,
    Region.RUSSIA,
    Region.SOUTH_EAST_ASIA,
    Region.TURKEY,
    Region.TAIWAN,
    Region.VIETNAM,
)

REGION_TO_ROUTE: dict[Region, Route] = {
    Region.BRASIL: Route.AMERICAS,
    Region.EUROPE_NORTH_EAST: Route.EUROPE,
    Region.EUROPE_WEST: Route.EUROPE,
    Region.JAPAN: Route.ASIA,
    Region.KOREA: Route.ASIA,
    Region.LATIN_AMERICA_NORTH: Route.AMERICAS,
    Region.LATIN_AMERICA_SOUTH: Route.AMERICAS,
    Region.MIDDLE_EAST: Route.EUROPE,
    Region.NORTH_AMERICA: Route.AMERICAS,
    Region.OCEANIA: Route.SEA,
    Region.RUSSIA: Route.EUROPE,
    Region.SOUTH_EAST_ASIA: Route.SEA,
    Region.TURKEY: Route.EUROPE,
    Region.TAIWAN: Route.SEA,
    Region.VIETNAM: Route.SEA,
}


class APIError(Exception):
    """An HTTP error response from one of the APIs."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return (self.message, self.status_code) == (other.message, other.status_code)

    def __hash__(self) -> int:
        return hash((self.message, self.status_code))

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"APIError(message={self.message!r}, status_code={self.status_code!r})"


BAD_REQUEST = APIError("bad request", HTTPStatus.BAD_REQUEST)
UNAUTHORIZED = APIError("unauthorized", HTTPStatus.UNAUTHORIZED)
FORBIDDEN = APIError("forbidden", HTTPStatus.FORBIDDEN)
NOT_FOUND = APIError("not found", HTTPStatus.NOT_FOUND)
METHOD_NOT_ALLOWED = APIError("method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)
UNSUPPORTED_MEDIA_TYPE = APIError("unsupported media type", HTTPStatus.UNSUPPORTED_MEDIA_TYPE)
RATE_LIMIT_EXCEEDED = APIError("rate limit exceeded", HTTPStatus.TOO_MANY_REQUESTS)
INTERNAL_SERVER_ERROR = APIError("internal server error", HTTPStatus.INTERNAL_SERVER_ERROR)
BAD_GATEWAY = APIError("bad gateway", HTTPStatus.BAD_GATEWAY)
SERVICE_UNAVAILABLE = APIError("service unavailable", HTTPStatus.SERVICE_UNAVAILABLE)
GATEWAY_TIMEOUT = APIError("gateway timeout", HTTPStatus.GATEWAY_TIMEOUT)

STATUS_TO_ERROR: dict[int, APIError] = {
    int(error.status_code): error
    for error in (
        BAD_REQUEST,
        UNAUTHORIZED,
        FORBIDDEN,
        NOT_FOUND,
        METHOD_NOT_ALLOWED,
        UNSUPPORTED_MEDIA_TYPE,
        RATE_LIMIT_EXCEEDED,
        INTERNAL_SERVER_ERROR,
        BAD_GATEWAY,
        SERVICE_UNAVAILABLE,
        GATEWAY_TIMEOUT,
    )
}

UNKNOWN_ERROR_MESSAGE = "unknown error reason"


def error_for_status(status_code: int) -> APIError:
    """Return a fresh error describing the given HTTP status code."""
    known = STATUS_TO_ERROR.get(int(status_code))
    if known is None:
        return APIError(UNKNOWN_ERROR_MESSAGE, status_code)
    return APIError(known.message, known.status_code)