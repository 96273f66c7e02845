"""Clients for the League of Legends challenge, champion and mastery endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Optional, TypeVar, Union

from ..transport import APIClient

ENDPOINT_BASE = "/lol"
ENDPOINT_MASTERY_BASE = ENDPOINT_BASE + "/champion-mastery/v4"
ENDPOINT_MASTERIES_BASE = ENDPOINT_MASTERY_BASE + "/champion-masteries"
ENDPOINT_GET_CHAMPION_MASTERIES = ENDPOINT_MASTERIES_BASE + "/by-summoner/{summoner_id}"
ENDPOINT_GET_CHAMPION_MASTERY = (
    ENDPOINT_MASTERIES_BASE + "/by-summoner/{summoner_id}/by-champion/{champion_id}"
)
ENDPOINT_GET_CHAMPION_MASTERY_TOTAL_SCORE = (
    ENDPOINT_MASTERY_BASE + "/scores/by-summoner/{summoner_id}"
)
ENDPOINT_CHALLENGES_BASE = ENDPOINT_BASE + "/challenges/v1"
ENDPOINT_CHALLENGES_BASE_CHALLENGES = ENDPOINT_CHALLENGES_BASE + "/challenges"
ENDPOINT_CHALLENGES_CONFIG = ENDPOINT_CHALLENGES_BASE_CHALLENGES + "/config"
ENDPOINT_CHALLENGES_PERCENTILES = ENDPOINT_CHALLENGES_BASE_CHALLENGES + "/percentiles"
ENDPOINT_CHALLENGES_CONFIG_BY_CHALLENGE_ID = (
    ENDPOINT_CHALLENGES_BASE_CHALLENGES + "/{challenge_id:d}/config"
)
ENDPOINT_CHALLENGES_LEADERBOARDS_BASE = (
    ENDPOINT_CHALLENGES_BASE_CHALLENGES + "/{challenge_id:d}/leaderboards"
)
ENDPOINT_CHALLENGES_LEADERBOARDS = (
    ENDPOINT_CHALLENGES_LEADERBOARDS_BASE + "/by-level/{tier}?limit={limit:d}"
)
ENDPOINT_CHALLENGES_PERCENTILES_BY_CHALLENGE_ID = (
    ENDPOINT_CHALLENGES_BASE_CHALLENGES + "/{challenge_id:d}/percentiles"
)
ENDPOINT_CHALLENGES_PLAYER_DATA_BY_PUUID = ENDPOINT_CHALLENGES_BASE + "/player-data/{puuid}"
ENDPOINT_PLATFORM_BASE = ENDPOINT_BASE + "/platform/v3"
ENDPOINT_GET_FREE_CHAMPION_ROTATION = ENDPOINT_PLATFORM_BASE + "/champion-rotations"

DEFAULT_LEADERBOARD_LIMIT = 50


class Queue(str, Enum):
    """A ranked queue."""

    RANKED_SOLO = "RANKED_SOLO_5x5"
    RANKED_FLEX = "RANKED_FLEX_SR"
    RANKED_TWISTED_TREELINE = "RANKED_FLEX_TT"

    def __str__(self) -> str:
        return self.value


class Tier(str, Enum):
    """A ranked tier."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    def __str__(self) -> str:
        return self.value


class Division(str, Enum):
    """A division within a ranked tier."""

    ONE = "I"
    TWO = "II"
    THREE = "III"
    FOUR = "IV"

    def __str__(self) -> str:
        return self.value


QUEUES: tuple[Queue, ...] = tuple(Queue)
# The divided tiers only; master and above have no divisions.
TIERS: tuple[Tier, ...] = (
    Tier.IRON,
    Tier.BRONZE,
    Tier.SILVER,
    Tier.GOLD,
    Tier.PLATINUM,
    Tier.EMERALD,
    Tier.DIAMOND,
)
DIVISIONS: tuple[Division, ...] = tuple(Division)

_T = TypeVar("_T")


def _json_list(value: Any) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return value


def _json_object(value: Any) -> Optional[dict]:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise TypeError(f"expected an object, got {type(value).__name__}")
    return dict(value)


def _percentiles(value: Any) -> dict[str, float]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"expected an object, got {type(value).__name__}")
    result = {}
    for key, number in value.items():
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            raise TypeError(f"expected a number, got {type(number).__name__}")
        result[str(key)] = float(number)
    return result


def _percentiles_by_challenge(value: Any) -> dict[str, dict[str, float]]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"expected an object, got {type(value).__name__}")
    return {str(key): _percentiles(item) for key, item in value.items()}


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


class _EndpointClient:
    category = ""

    def __init__(self, base: APIClient) -> None:
        self._base = base

    def _fetch(self, method: str, endpoint: str, decode: Callable[[Any], _T]) -> _T:
        try:
            return decode(self._base.get_json(endpoint))
        except Exception as exc:
            self._base.logger().debug("%s %s: %s", self.category, method, exc)
            raise


class ChallengesClient(_EndpointClient):
    """Methods for the challenges endpoints."""

    category = "challenges"

    def __init__(self, base: APIClient) -> None:
        super().__init__(base)

    def get_config(self) -> list[dict]:
        """Return the basic configuration of every challenge."""
        return self._fetch("get_config", ENDPOINT_CHALLENGES_CONFIG, _json_list)

    def get_percentiles(self) -> dict[str, dict[str, float]]:
        """Return, per challenge, the share of players who reached each level."""
        return self._fetch(
            "get_percentiles", ENDPOINT_CHALLENGES_PERCENTILES, _percentiles_by_challenge
        )

    def get_config_by_challenge_id(self, challenge_id: int) -> Optional[dict]:
        """Return the configuration of one challenge."""
        endpoint = ENDPOINT_CHALLENGES_CONFIG_BY_CHALLENGE_ID.format(challenge_id=challenge_id)
        return self._fetch("get_config_by_challenge_id", endpoint, _json_object)

    def get_leaderboard_by_challenge_id_and_level(
        self,
        challenge_id: int,
        tier: Union[Tier, str, None] = None,
        limit: int = 0,
    ) -> list[dict]:
        """Return the top players of a challenge at a level; defaults to 50 challengers."""
        if not tier:
            tier = Tier.CHALLENGER
        if limit <= 0:
            limit = DEFAULT_LEADERBOARD_LIMIT
        endpoint = ENDPOINT_CHALLENGES_LEADERBOARDS.format(
            challenge_id=challenge_id, tier=str(tier), limit=limit
        )
        return self._fetch("get_leaderboard_by_challenge_id_and_level", endpoint, _json_list)

    def get_percentiles_by_challenge_id(self, challenge_id: int) -> dict[str, float]:
        """Return the share of players who reached each level of one challenge."""
        endpoint = ENDPOINT_CHALLENGES_PERCENTILES_BY_CHALLENGE_ID.format(
            challenge_id=challenge_id
        )
        return self._fetch("get_percentiles_by_challenge_id", endpoint, _percentiles)

    def get_player_data_by_puuid(self, puuid: str) -> Optional[dict]:
        """Return a player's progress in all challenges."""
        endpoint = ENDPOINT_CHALLENGES_PLAYER_DATA_BY_PUUID.format(puuid=puuid)
        return self._fetch("get_player_data_by_puuid", endpoint, _json_object)


class ChampionClient(_EndpointClient):
    """Methods for the champion endpoints."""

    category = "champion"

    def __init__(self, base: APIClient) -> None:
        super().__init__(base)

    def get_free_rotation(self) -> Optional[dict]:
        """Return the current free champion rotation."""
        return self._fetch(
            "get_free_rotation", ENDPOINT_GET_FREE_CHAMPION_ROTATION, _json_object
        )


class ChampionMasteryClient(_EndpointClient):
    """Methods for the champion mastery endpoints."""

    category = "champion mastery"

    def __init__(self, base: APIClient) -> None:
        super().__init__(base)

    def list(self, summoner_id: str) -> list[dict]:
        """Return all champion masteries of a summoner."""
        endpoint = ENDPOINT_GET_CHAMPION_MASTERIES.format(summoner_id=summoner_id)
        return self._fetch("list", endpoint, _json_list)

    def get(self, summoner_id: str, champion_id: str) -> Optional[dict]:
        """Return a summoner's mastery of one champion."""
        endpoint = ENDPOINT_GET_CHAMPION_MASTERY.format(
            summoner_id=summoner_id, champion_id=champion_id
        )
        return self._fetch("get", endpoint, _json_object)

    def get_total(self, summoner_id: str) -> int:
        """Return the summed mastery score over all champions a summoner played."""
        endpoint = ENDPOINT_GET_CHAMPION_MASTERY_TOTAL_SCORE.format(summoner_id=summoner_id)
        return self._fetch("get_total", endpoint, _integer)


class LoLClient:
    """All League of Legends endpoint clients sharing one base client."""

    def __init__(self, base: APIClient) -> None:
        self.challenge = ChallengesClient(base)
        self.champion_mastery = ChampionMasteryClient(base)
        self.champion = ChampionClient(base)