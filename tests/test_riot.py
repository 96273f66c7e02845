import json

import pytest

from riotkit.api import NOT_FOUND, APIError, Region
from riotkit.riot.account import Account
from riotkit.riot.riot import RiotClient
from riotkit.transport import Response


class RecordingDoer:
    def __init__(self, payload=None, status=200):
        self.payload = payload
        self.status = status
        self.requests = []

    def do(self, request):
        self.requests.append(request)
        body = json.dumps(self.payload).encode() if self.payload is not None else b""
        return Response(status_code=self.status, body=body)


def test_account_requests_go_to_regional_route():
    doer = RecordingDoer({"puuid": "abc", "gameName": "name", "tagLine": "tag"})
    client = RiotClient(Region.EUROPE_WEST, "placeholder", doer)
    account = client.account.get_by_puuid("abc")
    assert account == Account(puuid="abc", game_name="name", tag_line="tag")
    assert doer.requests[0].url == (
        "https://europe.api.riotgames.com/riot/account/v1/accounts/by-puuid/abc"
    )


def test_lol_requests_use_platform_region_and_key():
    doer = RecordingDoer(1)
    client = RiotClient(Region.EUROPE_WEST, "placeholder", doer)
    assert client.lol.champion_mastery.get_total("id") == 1
    request = doer.requests[0]
    assert request.headers["X-Riot-Token"] == "placeholder"
    assert request.url.startswith("https://euw1.api.riotgames.com/lol/champion-mastery/v4")


def test_region_is_exposed():
    client = RiotClient(Region.KOREA, "placeholder", RecordingDoer())
    assert client.region == Region.KOREA


def test_deprecated_aliases_point_at_lol_clients():
    client = RiotClient(Region.EUROPE_WEST, "placeholder", RecordingDoer())
    with pytest.warns(DeprecationWarning):
        assert client.champion_mastery is client.lol.champion_mastery
    with pytest.warns(DeprecationWarning):
        assert client.champion is client.lol.champion


def test_error_status_raises_api_error():
    client = RiotClient(Region.EUROPE_WEST, "placeholder", RecordingDoer(status=404))
    with pytest.raises(APIError) as info:
        client.lol.champion.get_free_rotation()
    assert info.value == NOT_FOUND