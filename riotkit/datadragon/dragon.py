"""Client for the Data Dragon service, which serves static game data per patch."""

from __future__ import annotations

import dataclasses
import logging
import re
import threading
from collections.abc import Mapping
from typing import Any, Callable, Optional, TypeVar, Union

from ..api import Region, error_for_status
from ..transport import Doer, Request, Response, UrllibDoer
from .constants import BASE_URL, DATA_URL_FORMAT, IMAGE_URL_FORMAT, LanguageCode
from .models import (
    ChampionData,
    ChampionDataExtended,
    Item,
    Mastery,
    ProfileIcon,
    SummonerSpell,
)

LATEST_RUNE_AND_MASTERY_VERSION = "7.23.1"
FALLBACK_VERSION = "9.10.1"
FALLBACK_LANGUAGE = LanguageCode.UNITED_STATES

_REALM_REGIONS: dict[Region, str] = {
    Region.BRASIL: "br",
    Region.EUROPE_WEST: "euw",
    Region.EUROPE_NORTH_EAST: "eun",
    Region.JAPAN: "jp",
    Region.KOREA: "kr",
    Region.LATIN_AMERICA_NORTH: "lan",
    Region.LATIN_AMERICA_SOUTH: "las",
    Region.MIDDLE_EAST: "me",
    Region.NORTH_AMERICA: "na",
    Region.OCEANIA: "oce",
    Region.PBE: "pbe",
    Region.RUSSIA: "ru",
    Region.SOUTH_EAST_ASIA: "sea",
    Region.TURKEY: "tr",
    Region.TAIWAN: "tw",
    Region.VIETNAM: "vn",
}

_INTEGER = re.compile(r"[+-]?[0-9]+")

_T = TypeVar("_T")


def version_greater_than(v1: str, v2: str) -> bool:
    """Tell whether version ``v1`` is greater than ``v2``, comparing dotted parts."""
    for part1, part2 in zip(v1.split("."), v2.split(".")):
        if not _INTEGER.fullmatch(part1) or not _INTEGER.fullmatch(part2):
            return False
        if int(part1) > int(part2):
            return True
    return False


def _realm_for(region: Any) -> str:
    try:
        return _REALM_REGIONS.get(Region(region), "")
    except ValueError:
        return ""


def _language_for(value: str) -> Union[LanguageCode, str]:
    try:
        return LanguageCode(value)
    except ValueError:
        return value


def _response_data(payload: Any) -> dict:
    """Pull the ``data`` member out of a Data Dragon response."""
    if not isinstance(payload, Mapping):
        raise ValueError("Data Dragon response is not a JSON object")
    if "data" in payload:
        data = payload["data"]
    else:
        data = next(
            (value for key, value in payload.items() if str(key).lower() == "data"), None
        )
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("Data Dragon response data is not a JSON object")
    return dict(data)


def _extend(champion: ChampionData) -> ChampionDataExtended:
    values = {f.name: getattr(champion, f.name) for f in dataclasses.fields(ChampionData)}
    return ChampionDataExtended(**values)


def _summary(champion: ChampionDataExtended) -> ChampionData:
    values = {f.name: getattr(champion, f.name) for f in dataclasses.fields(ChampionData)}
    return ChampionData(**values)


class DataDragonClient:
    """Access to the data served by Data Dragon, cached per client."""

    def __init__(
        self,
        doer: Optional[Doer] = None,
        region: Any = Region.EUROPE_WEST,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._doer: Doer = doer if doer is not None else UrllibDoer()
        base_logger = logger if logger is not None else logging.getLogger("riotkit")
        self._log = logging.LoggerAdapter(base_logger, {"client": "data dragon"})
        self.version: str = FALLBACK_VERSION
        self.language: Union[LanguageCode, str] = FALLBACK_LANGUAGE

        self._champions_lock = threading.Lock()
        self._champions_by_id: dict[str, ChampionDataExtended] = {}
        self._champions_loaded = False
        self._locks: dict[str, threading.Lock] = {
            name: threading.Lock()
            for name in ("profile_icons", "items", "masteries", "runes", "summoner_spells")
        }
        self._caches: dict[str, list] = {name: [] for name in self._locks}

        try:
            self._init(_realm_for(region))
        except Exception as exc:
            self._log.debug("falling back to default version: %s", exc)
            self.version = FALLBACK_VERSION
            self.language = FALLBACK_LANGUAGE

    def _init(self, realm: str) -> None:
        response = self._do_request(BASE_URL, f"/realms/{realm}.json")
        payload = response.json()
        if not isinstance(payload, Mapping):
            raise ValueError("realm response is not a JSON object")
        version = payload.get("v")
        language = payload.get("l")
        for value in (version, language):
            if value is not None and not isinstance(value, str):
                raise ValueError("realm response holds a non-string value")
        self.version = version or ""
        self.language = _language_for(language or "")

    def get_champions(self) -> list[ChampionData]:
        """Return all existing champions."""
        with self._champions_lock:
            if not self._champions_loaded:
                raw = self._get_data("/champion.json")
                for value in raw.values():
                    champion = ChampionData.from_dict(value)
                    self._champions_by_id[champion.id] = _extend(champion)
                self._champions_loaded = True
            return [_summary(champion) for champion in self._champions_by_id.values()]

    def get_champion_by_id(self, champion_id: str) -> ChampionDataExtended:
        """Return full information about the champion with the given id."""
        with self._champions_lock:
            champion = self._champions_by_id.get(champion_id)
            if champion is None or champion.lore == "":
                raw = self._get_data(f"/champion/{champion_id}.json")
                if champion_id not in raw:
                    raise error_for_status(404)
                champion = ChampionDataExtended.from_dict(raw[champion_id])
                self._champions_by_id[champion_id] = champion
            return champion

    def get_champion(self, name: str) -> ChampionDataExtended:
        """Return full information about the champion with the given name."""
        for champion in self.get_champions():
            if champion.name == name:
                return self.get_champion_by_id(champion.id)
        raise error_for_status(404)

    def get_profile_icons(self) -> list[ProfileIcon]:
        """Return all existing profile icons."""
        return self._cached(
            "profile_icons", "/profileicon.json", lambda _key, value: ProfileIcon.from_dict(value)
        )

    def get_profile_icon(self, icon_id: int) -> ProfileIcon:
        """Return the profile icon with the given id."""
        return self._find(self.get_profile_icons(), lambda icon: icon.id == icon_id)

    def get_items(self) -> list[Item]:
        """Return all existing items."""
        return self._cached(
            "items",
            "/item.json",
            lambda key, value: dataclasses.replace(Item.from_dict(value), id=str(key)),
        )

    def get_item(self, item_id: str) -> Item:
        """Return the item with the given id."""
        return self._find(self.get_items(), lambda item: item.id == item_id)

    def get_masteries(self) -> list[Mastery]:
        """Return all masteries; newer versions fall back to the last one that had them."""
        return self._cached(
            "masteries", "/mastery.json", lambda _key, value: Mastery.from_dict(value)
        )

    def get_mastery(self, mastery_id: int) -> Mastery:
        """Return the mastery with the given id."""
        return self._find(self.get_masteries(), lambda mastery: mastery.id == mastery_id)

    def get_runes(self) -> list[Item]:
        """Return all old-style runes; newer versions fall back to the last one that had them."""
        return self._cached(
            "runes",
            "/rune.json",
            lambda key, value: dataclasses.replace(Item.from_dict(value), id=str(key)),
        )

    def get_rune(self, rune_id: str) -> Item:
        """Return the rune with the given id."""
        return self._find(self.get_runes(), lambda rune: rune.id == rune_id)

    def get_summoner_spells(self) -> list[SummonerSpell]:
        """Return all existing summoner spells."""
        return self._cached(
            "summoner_spells",
            "/summoner.json",
            lambda _key, value: SummonerSpell.from_dict(value),
        )

    def get_summoner_spell(self, key: str) -> SummonerSpell:
        """Return the summoner spell with the given key."""
        return self._find(self.get_summoner_spells(), lambda spell: spell.key == key)

    def clear_caches(self) -> None:
        """Forget everything fetched so far."""
        with self._champions_lock:
            self._champions_by_id = {}
            self._champions_loaded = False
        for name, lock in self._locks.items():
            with lock:
                self._caches[name] = []

    def _cached(self, name: str, endpoint: str, decode: Callable[[str, Any], _T]) -> list[_T]:
        with self._locks[name]:
            cached = self._caches[name]
            if not cached:
                raw = self._get_data(endpoint)
                cached = [decode(key, value) for key, value in raw.items()]
                self._caches[name] = cached
            return list(cached)

    @staticmethod
    def _find(entries: list[_T], matches: Callable[[_T], bool]) -> _T:
        found = next((entry for entry in entries if matches(entry)), None)
        if found is None:
            raise error_for_status(404)
        return found

    def _get_data(self, endpoint: str) -> dict:
        response = self._do_request(DATA_URL_FORMAT, endpoint)
        return _response_data(response.json())

    def _do_request(self, url_format: str, endpoint: str) -> Response:
        request = self._new_request(url_format, endpoint)
        response = self._doer.do(request)
        if not 200 <= response.status_code <= 299:
            raise error_for_status(response.status_code)
        return response

    def _new_request(self, url_format: str, endpoint: str) -> Request:
        version = self.version
        if ("rune" in endpoint or "mastery" in endpoint) and version_greater_than(
            version, LATEST_RUNE_AND_MASTERY_VERSION
        ):
            version = LATEST_RUNE_AND_MASTERY_VERSION
        if url_format == DATA_URL_FORMAT:
            url = url_format.format(version=version, language=str(self.language))
        elif url_format == IMAGE_URL_FORMAT:
            url = url_format.format(version=version)
        else:
            url = url_format
        url = "https://" + url + endpoint
        if any(ord(char) < 0x20 or ord(char) == 0x7F for char in url):
            raise ValueError(f"invalid control character in URL {url!r}")
        return Request(method="GET", url=url)