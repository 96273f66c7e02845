"""HTTP plumbing shared by the Riot API clients."""

from __future__ import annotations

import copy
import json
import logging
import re
import time
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence

from .api import error_for_status

API_URL_FORMAT = "{scheme}://{region}.{base}{endpoint}"
BASE_URL = "api.riotgames.com"
SCHEME = "https"
API_TOKEN_HEADER = "X-Riot-Token"

_METHOD_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class Request:
    """An outgoing HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


@dataclass
class Response:
    """An HTTP response with its whole body read."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    reason: str = ""

    def header(self, name: str, default: str = "") -> str:
        """Look a header up without regard to case."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


class Doer(Protocol):
    """Anything that can carry out an HTTP request."""

    def do(self, request: Request) -> Response:
        """Send the request and return the response."""
        ...


class UrllibDoer:
    """A Doer built on urllib; error statuses are returned, not raised."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def do(self, request: Request) -> Response:
        outgoing = urllib.request.Request(
            request.url,
            data=request.body,
            headers=dict(request.headers),
            method=request.method,
        )
        try:
            with urllib.request.urlopen(outgoing, timeout=self.timeout) as reply:
                return Response(
                    status_code=reply.status,
                    headers=dict(reply.headers.items()),
                    body=reply.read(),
                    reason=reply.reason or "",
                )
        except urllib.error.HTTPError as exc:
            headers = dict(exc.headers.items()) if exc.headers is not None else {}
            return Response(
                status_code=exc.code,
                headers=headers,
                body=exc.read() or b"",
                reason=str(exc.reason or ""),
            )


RequestOption = Callable[[Request], None]


def with_header(key: str, value: str) -> RequestOption:
    """Return an option that adds a header to a request."""

    def apply(request: Request) -> None:
        request.headers[key] = value

    return apply


def _region_value(region: Any) -> str:
    return str(getattr(region, "value", region))


class APIClient:
    """Talks to the Riot API for one region, handling retries and rate limits."""

    def __init__(
        self,
        region: Any,
        api_key: str,
        doer: Optional[Doer] = None,
        logger: Optional[logging.Logger] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.region = region
        self.api_key = api_key
        self.doer: Doer = doer if doer is not None else UrllibDoer()
        self._log = logger if logger is not None else logging.getLogger("riotkit")
        self._sleep = sleep

    def with_region(self, region: Any) -> "APIClient":
        """Return a copy of this client that talks to another region or route."""
        other = copy.copy(self)
        other.region = region
        return other

    def logger(self) -> logging.LoggerAdapter:
        """Return a logger carrying the client's region."""
        return logging.LoggerAdapter(self._log, {"region": _region_value(self.region)})

    def _call_logger(self, method: str, endpoint: str) -> logging.LoggerAdapter:
        return logging.LoggerAdapter(
            self._log,
            {"region": _region_value(self.region), "method": method, "endpoint": endpoint},
        )

    def get_json(self, endpoint: str, *options: RequestOption) -> Any:
        """Send a GET request and return the decoded JSON body."""
        log = self._call_logger("get_json", endpoint)
        response = self.get(endpoint, *options)
        try:
            return response.json()
        except ValueError as exc:
            log.debug(exc)
            raise

    def post_json(self, endpoint: str, body: Any, *options: RequestOption) -> Any:
        """Send a POST request with a JSON body and return the decoded JSON reply."""
        log = self._call_logger("post_json", endpoint)
        response = self.post(endpoint, body, *options)
        try:
            return response.json()
        except ValueError as exc:
            log.debug(exc)
            raise

    def put(self, endpoint: str, body: Any, *options: RequestOption) -> None:
        """Send a PUT request with a JSON body."""
        payload = self._encode(body, "put", endpoint)
        self.do_request("PUT", endpoint, payload, options)

    def get(self, endpoint: str, *options: RequestOption) -> Response:
        """Send a GET request."""
        return self.do_request("GET", endpoint, None, options)

    def post(self, endpoint: str, body: Any, *options: RequestOption) -> Response:
        """Send a POST request with a JSON body."""
        payload = self._encode(body, "post", endpoint)
        return self.do_request("POST", endpoint, payload, options)

    def _encode(self, body: Any, method: str, endpoint: str) -> bytes:
        try:
            return json.dumps(body).encode("utf-8") + b"\n"
        except (TypeError, ValueError) as exc:
            self._call_logger(method, endpoint).debug(exc)
            raise

    def do_request(
        self,
        method: str,
        endpoint: str,
        body: Optional[bytes],
        options: Optional[Sequence[RequestOption]],
    ) -> Response:
        """Send a request, retrying once on 503 and waiting out rate limits."""
        log = self._call_logger("do_request", endpoint)
        while True:
            try:
                request = self.new_request(method, endpoint, body, options)
                response = self.doer.do(request)
                if response.status_code == 503:
                    log.info("service unavailable, retrying")
                    self._sleep(1)
                    response = self.doer.do(request)
            except Exception as exc:
                log.debug(exc)
                raise
            if response.status_code == 429:
                retry = response.header("Retry-After")
                if not _INTEGER_PATTERN.fullmatch(retry):
                    error = ValueError(f"invalid Retry-After header: {retry!r}")
                    log.debug(error)
                    raise error
                seconds = int(retry)
                log.info("rate limited, waiting %d seconds", seconds)
                self._sleep(seconds)
                continue
            if not 200 <= response.status_code <= 299:
                log.debug("error response: %s %s", response.status_code, response.reason)
                raise error_for_status(response.status_code)
            return response

    def new_request(
        self,
        method: str,
        endpoint: str,
        body: Optional[bytes],
        options: Optional[Sequence[RequestOption]],
    ) -> Request:
        """Build a request carrying the API key and the JSON accept header."""
        method = method or "GET"
        if not _METHOD_PATTERN.fullmatch(method):
            error = ValueError(f"invalid method {method!r}")
            self._call_logger("new_request", endpoint).debug(error)
            raise error
        url = API_URL_FORMAT.format(
            scheme=SCHEME, region=_region_value(self.region), base=BASE_URL, endpoint=endpoint
        )
        if any(ord(char) < 0x20 or ord(char) == 0x7F for char in url):
            error = ValueError(f"invalid control character in URL {url!r}")
            self._call_logger("new_request", endpoint).debug(error)
            raise error
        request = Request(
            method=method,
            url=url,
            headers={API_TOKEN_HEADER: self.api_key, "Accept": "application/json"},
            body=body,
        )
        for option in options or ():
            option(request)
        return request