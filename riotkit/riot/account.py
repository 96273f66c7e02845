"""Client for the Riot account endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..api import REGION_TO_ROUTE, Region, Route
from ..transport import APIClient

ENDPOINT_BASE = "/riot"
ENDPOINT_ACCOUNT_BASE = ENDPOINT_BASE + "/account/v1"
ENDPOINT_ACCOUNTS_BASE = ENDPOINT_ACCOUNT_BASE + "/accounts"
ENDPOINT_GET_BY_PUUID = ENDPOINT_ACCOUNTS_BASE + "/by-puuid/{puuid}"
ENDPOINT_GET_BY_RIOT_ID = ENDPOINT_ACCOUNTS_BASE + "/by-riot-id/{game_name}/{tag_line}"


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a string, got {type(value).__name__}")


@dataclass
class Account:
    """A Riot user account."""

    puuid: str = ""
    game_name: str = ""
    tag_line: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Account":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        return cls(
            puuid=_as_str(data.get("puuid")),
            game_name=_as_str(data.get("gameName")),
            tag_line=_as_str(data.get("tagLine")),
        )


def _route_for(region: Any) -> Union[Route, str]:
    """Map a region to its regional route; unknown regions map to an empty route."""
    try:
        return REGION_TO_ROUTE.get(Region(getattr(region, "value", region)), "")
    except ValueError:
        return ""


class AccountClient:
    """Methods for the account endpoints, which are served per regional route."""

    def __init__(self, base: APIClient) -> None:
        self._base = base

    def _routed(self) -> APIClient:
        return self._base.with_region(_route_for(self._base.region))

    def _fetch(self, method: str, endpoint: str) -> Account:
        client = self._routed()
        try:
            return Account.from_dict(client.get_json(endpoint))
        except Exception as exc:
            client.logger().debug("account %s: %s", method, exc)
            raise

    def get_by_puuid(self, puuid: str) -> Account:
        """Return the account with the given PUUID."""
        return self._fetch("get_by_puuid", ENDPOINT_GET_BY_PUUID.format(puuid=puuid))

    def get_by_riot_id(self, game_name: str, tag_line: str) -> Account:
        """Return the account with the given Riot ID."""
        endpoint = ENDPOINT_GET_BY_RIOT_ID.format(game_name=game_name, tag_line=tag_line)
        return self._fetch("get_by_riot_id", endpoint)