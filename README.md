# riotkit

A small, dependency-free client for the Riot Games API and the Data Dragon
static data service.

## Installation

```
pip install riotkit
```

To run the tests:

```
pip install "riotkit[test]"
pytest
```

## Overview

- `riotkit.client.Client` bundles everything. It is created from an API key and
  the keyword-only options `region` (default `Region.EUROPE_WEST`), `doer`
  (default `UrllibDoer()`) and `logger`. It exposes `riot` (a `RiotClient`)
  and `data_dragon` (a `DataDragonClient`).
- `riotkit.api` holds the `Region` and `Route` enums, `REGIONS`,
  `REGION_TO_ROUTE`, the `APIError` exception and `error_for_status`.
- `riotkit.transport` holds the HTTP layer: `Request`, `Response`, the `Doer`
  protocol, the default `UrllibDoer`, `with_header` and `APIClient`.
- `riotkit.datadragon.dragon` provides `DataDragonClient`;
  `riotkit.datadragon.models` holds the data classes it returns;
  `riotkit.datadragon.constants` holds `LanguageCode`.
- `riotkit.riot.riot` provides `RiotClient`; `riotkit.riot.account` provides
  `AccountClient` and `Account`; `riotkit.riot.lol` provides
  `ChallengesClient`, `ChampionClient` and `ChampionMasteryClient`, bundled in
  `LoLClient`, along with the `Queue`, `Tier` and `Division` enums.

## Static data from Data Dragon

```python
import logging

from riotkit.api import Region
from riotkit.datadragon.dragon import DataDragonClient
from riotkit.transport import UrllibDoer

dragon = DataDragonClient(UrllibDoer(), Region("na1"), logging.getLogger("riotkit"))
ashe = dragon.get_champion("Ashe")
print(ashe.name, ashe.title)
```

On creation the client asks Data Dragon for the current version and language of
the region's realm; if that fails it uses version `9.10.1` and `en_US`. Runes
and masteries are always fetched from version `7.23.1` or older, the last one
that had them.

The client offers `get_champions`, `get_champion`, `get_champion_by_id`,
`get_items`, `get_item`, `get_runes`, `get_rune`, `get_masteries`,
`get_mastery`, `get_profile_icons`, `get_profile_icon`,
`get_summoner_spells` and `get_summoner_spell`. Lookups that find nothing
raise the "not found" `APIError`. Results are cached per client; call
`dragon.clear_caches()` to fetch them again.

## The Riot API

```python
import logging
import time

from riotkit.api import APIError, Region
from riotkit.riot.account import AccountClient
from riotkit.riot.lol import ChampionMasteryClient
from riotkit.transport import APIClient, UrllibDoer

api_key = "placeholder"
base = APIClient(Region("euw1"), api_key, UrllibDoer(), logging.getLogger("riotkit"), time.sleep)

account = AccountClient(base).get_by_riot_id("SomeName", "EUW")
print(account.puuid, account.game_name, account.tag_line)
try:
    print(ChampionMasteryClient(base).get_total("some-summoner-id"))
except APIError as exc:
    print("request failed:", exc)
```

Account requests go to the regional route of the client's region (for example
`europe` for `euw1`). Challenge, champion rotation and mastery results are
returned as decoded JSON: lists and dictionaries, or an integer for
`get_total`. `get_leaderboard_by_challenge_id_and_level` defaults to the
`CHALLENGER` tier and a limit of 50.

Requests that are answered with `503 Service Unavailable` are retried once after
a second. When the API answers `429 Too Many Requests`, the client waits for the
number of seconds in the `Retry-After` header and tries again; a header that is
not a whole number raises `ValueError`. Any other non-2xx status raises an
`APIError`; `error_for_status(404)` returns the error that is raised for a given
status.

`RiotClient.champion` and `RiotClient.champion_mastery` still work but emit a
`DeprecationWarning`; use `RiotClient.lol.champion` and
`RiotClient.lol.champion_mastery` instead.

## What it does not do

Only the account, challenges, champion rotation and champion mastery endpoints
are covered. There are no clients for summoners, leagues, matches, spectator
data, server status, third-party codes or tournaments, nor for Legends of
Runeterra, Teamfight Tactics or Valorant. There is no command-line tool.