import json
import logging

from riotkit.api import Region
from riotkit.client import Client
from riotkit.datadragon.constants import LanguageCode
from riotkit.transport import Response


class RoutingDoer:
    def __init__(self, realm=None, api_payload=None, status=200):
        self.realm = realm
        self.api_payload = api_payload
        self.status = status
        self.requests = []

    def do(self, request):
        self.requests.append(request)
        if self.status != 200:
            return Response(status_code=self.status)
        if "ddragon" in request.url:
            return Response(status_code=200, body=json.dumps(self.realm).encode())
        return Response(status_code=200, body=json.dumps(self.api_payload).encode())


def test_new_client_with_options():
    doer = RoutingDoer({"v": "13.1.1", "l": "en_GB"})
    logger = logging.getLogger("riotkit")
    client = Client("api_key", logger=logger, region=Region.EUROPE_WEST, doer=doer)
    assert client.api_key == "api_key"
    assert client.region == Region.EUROPE_WEST
    assert client.logger is logger
    assert client.doer is doer
    assert client.riot.region == Region.EUROPE_WEST


def test_default_region_is_europe_west():
    client = Client("placeholder", doer=RoutingDoer({"v": "13.1.1", "l": "en_GB"}))
    assert client.region == Region.EUROPE_WEST
    assert client.riot.region == Region.EUROPE_WEST


def test_data_dragon_reads_realm_for_region():
    doer = RoutingDoer({"v": "13.1.1", "l": "en_GB"})
    client = Client("placeholder", region=Region.KOREA, doer=doer)
    assert doer.requests[0].url == "https://ddragon.leagueoflegends.com/realms/kr.json"
    assert client.data_dragon.version == "13.1.1"
    assert client.data_dragon.language == LanguageCode.UNITED_KINGDOM


def test_data_dragon_falls_back_when_realm_fails():
    client = Client("placeholder", doer=RoutingDoer(status=500))
    assert client.data_dragon.version == "9.10.1"
    assert client.data_dragon.language == LanguageCode.UNITED_STATES


def test_riot_client_uses_region_and_key():
    doer = RoutingDoer({"v": "13.1.1", "l": "en_GB"}, api_payload={"freeChampionIds": [1]})
    client = Client("placeholder", region=Region.NORTH_AMERICA, doer=doer)
    rotation = client.riot.lol.champion.get_free_rotation()
    assert rotation == {"freeChampionIds": [1]}
    request = doer.requests[-1]
    assert request.url.startswith("https://na1.api.riotgames.com/lol/platform/v3")
    assert request.headers["X-Riot-Token"] == "placeholder"