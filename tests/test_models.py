import pytest

from riotkit.datadragon.models import (
    ChampionData,
    ChampionDataExtended,
    ChampionDataInfo,
    ChampionDataStats,
    ImageData,
    Item,
    ItemGold,
    ItemRune,
    ItemStats,
    LevelTip,
    Mastery,
    PassiveData,
    ProfileIcon,
    RecommendedItem,
    RecommendedItemData,
    RecommendedItemSet,
    SkinData,
    SpellData,
    SpellVar,
    SummonerSpell,
    SummonerSpellVar,
    parse_integer,
)


class _RecordingClient:
    def __init__(self, champion=None, item=None):
        self.calls = []
        self._champion = champion
        self._item = item

    def get_champion(self, name):
        self.calls.append(("get_champion", name))
        return self._champion

    def get_item(self, item_id):
        self.calls.append(("get_item", item_id))
        return self._item


def test_parse_integer_accepts_number():
    assert parse_integer(42) == 42


@pytest.mark.parametrize("text,expected", [("17", 17), ('"17"', 17), ("-3", -3), ("+8", 8)])
def test_parse_integer_accepts_strings(text, expected):
    assert parse_integer(text) == expected


@pytest.mark.parametrize("value", ["abc", "1.5", 1.5, None, True, "", " 4", [1]])
def test_parse_integer_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_integer(value)


def test_empty_object_gives_defaults():
    assert ImageData.from_dict({}) == ImageData()
    assert ChampionDataInfo.from_dict({}) == ChampionDataInfo()
    assert ChampionDataStats.from_dict({}) == ChampionDataStats()
    assert ChampionData.from_dict({}) == ChampionData()
    assert ChampionDataExtended.from_dict({}) == ChampionDataExtended()
    assert SkinData.from_dict({}) == SkinData()
    assert LevelTip.from_dict({}) == LevelTip()
    assert SpellVar.from_dict({}) == SpellVar()
    assert SpellData.from_dict({}) == SpellData()
    assert PassiveData.from_dict({}) == PassiveData()
    assert RecommendedItem.from_dict({}) == RecommendedItem()
    assert RecommendedItemSet.from_dict({}) == RecommendedItemSet()
    assert RecommendedItemData.from_dict({}) == RecommendedItemData()
    assert ItemRune.from_dict({}) == ItemRune()
    assert ItemGold.from_dict({}) == ItemGold()
    assert ItemStats.from_dict({}) == ItemStats()
    assert Item.from_dict({}) == Item()
    assert Mastery.from_dict({}) == Mastery()
    assert ProfileIcon.from_dict({}) == ProfileIcon()
    assert SummonerSpellVar.from_dict({}) == SummonerSpellVar()
    assert SummonerSpell.from_dict({}) == SummonerSpell()


def test_null_gives_defaults():
    assert ImageData.from_dict(None) == ImageData()
    assert ChampionDataInfo.from_dict(None) == ChampionDataInfo()
    assert ChampionDataStats.from_dict(None) == ChampionDataStats()
    assert ChampionData.from_dict(None) == ChampionData()
    assert ChampionDataExtended.from_dict(None) == ChampionDataExtended()
    assert SkinData.from_dict(None) == SkinData()
    assert LevelTip.from_dict(None) == LevelTip()
    assert SpellVar.from_dict(None) == SpellVar()
    assert SpellData.from_dict(None) == SpellData()
    assert PassiveData.from_dict(None) == PassiveData()
    assert RecommendedItem.from_dict(None) == RecommendedItem()
    assert RecommendedItemSet.from_dict(None) == RecommendedItemSet()
    assert RecommendedItemData.from_dict(None) == RecommendedItemData()
    assert ItemRune.from_dict(None) == ItemRune()
    assert ItemGold.from_dict(None) == ItemGold()
    assert ItemStats.from_dict(None) == ItemStats()
    assert Item.from_dict(None) == Item()
    assert Mastery.from_dict(None) == Mastery()
    assert ProfileIcon.from_dict(None) == ProfileIcon()
    assert SummonerSpellVar.from_dict(None) == SummonerSpellVar()
    assert SummonerSpell.from_dict(None) == SummonerSpell()


@pytest.mark.parametrize("model", [ChampionData, Item, ProfileIcon])
def test_non_object_rejected(model):
    with pytest.raises(TypeError):
        model.from_dict([1, 2])


def test_champion_data_fields():
    data = {
        "version": "9.10.1",
        "id": "Ashe",
        "key": "22",
        "name": "Ashe",
        "title": "the Frost Archer",
        "info": {"attack": 7, "defense": 3, "magic": 2, "difficulty": 4},
        "image": {"full": "Ashe.png", "x": 48, "w": 48},
        "tags": ["Marksman", "Support"],
        "partype": "Mana",
        "stats": {"hp": 539, "attackrange": 600, "attackspeedperlevel": 3.33},
        "unknown": "ignored",
    }
    champion = ChampionData.from_dict(data)
    assert champion.id == "Ashe"
    assert champion.key == "22"
    assert champion.title == "the Frost Archer"
    assert champion.info == ChampionDataInfo(attack=7, defense=3, magic=2, difficulty=4)
    assert champion.image.full == "Ashe.png"
    assert champion.image.w == 48
    assert champion.tags == ["Marksman", "Support"]
    assert champion.stats.health_points == 539.0
    assert champion.stats.attack_range == 600.0
    assert champion.stats.attack_speed_per_level == 3.33


def test_champion_extended_includes_base_fields():
    data = {
        "id": "champion-id",
        "name": "champion-name",
        "lore": "a story",
        "allytips": ["tip"],
        "skins": [{"id": "1000", "num": 1, "name": "skin", "chromas": True}],
        "passive": {"name": "passive", "description": "does things"},
        "recommended": [{"champion": "champion-id", "sortrank": 2}],
    }
    extended = ChampionDataExtended.from_dict(data)
    assert isinstance(extended, ChampionData)
    assert extended.id == "champion-id"
    assert extended.name == "champion-name"
    assert extended.lore == "a story"
    assert extended.ally_tips == ["tip"]
    assert extended.skins == [SkinData(id="1000", num=1, name="skin", chromas=True)]
    assert extended.passive.description == "does things"
    assert extended.recommended_items[0].sort_rank == 2


def test_champion_extended_equals_keyword_construction():
    extended = ChampionDataExtended.from_dict({"id": "champion-id", "name": "champion-name"})
    assert extended == ChampionDataExtended(id="champion-id", name="champion-name")


def test_spell_data_uses_abstract_key_and_nested_lists():
    spell = SpellData.from_dict(
        {
            "abstract": "summary",
            "description": "not used",
            "leveltip": {"label": ["Damage"], "effect": ["{{ e1 }}"]},
            "effect": [None, [10, 20.5]],
            "vars": [{"link": "attackdamage", "coeff": 1, "key": "a1"}],
            "cooldown": [12, 10],
            "maxrank": 5,
        }
    )
    assert spell.description == "summary"
    assert spell.leveltip == LevelTip(label=["Damage"], effect=["{{ e1 }}"])
    assert spell.effect == [[], [10.0, 20.5]]
    assert spell.vars == [SpellVar(link="attackdamage", coefficient=1.0, key="a1")]
    assert spell.cooldown == [12.0, 10.0]
    assert spell.max_rank == 5


def test_item_nested_structures():
    item = Item.from_dict(
        {
            "name": "Boots",
            "rune": {"isrune": True, "tier": 1, "type": "red"},
            "gold": {"base": 300, "total": 300, "sell": 210, "purchasable": True},
            "colloq": "boots",
            "from": ["1001"],
            "into": ["3006"],
            "maps": {"11": True, "12": False},
            "stats": {"FlatMovementSpeedMod": 25, "rPercentCooldownModPerLevel": 0.5},
        }
    )
    assert item.name == "Boots"
    assert item.rune == ItemRune(is_rune=True, tier=1, type="red")
    assert item.gold == ItemGold(base=300, total=300, sell=210, purchasable=True)
    assert item.colloquial == "boots"
    assert item.from_ == ["1001"]
    assert item.into == ["3006"]
    assert item.maps == {"11": True, "12": False}
    assert item.stats.flat_movement_speed_mod == 25.0
    assert item.stats.r_percent_cooldown_mod_per_level == 0.5
    assert item.stats.flat_hp_pool_mod == 0.0


def test_item_stats_key_mapping():
    stats = ItemStats.from_dict({"FlatHPPoolMod": 300, "PercentLifeStealMod": 0.1, "FlatEXPBonus": 2})
    assert stats.flat_hp_pool_mod == 300.0
    assert stats.percent_life_steal_mod == 0.1
    assert stats.flat_exp_bonus == 2.0


def test_mastery_fields():
    mastery = Mastery.from_dict({"id": 6111, "name": "Fury", "description": ["a", "b"], "ranks": 5, "prereq": "0"})
    assert mastery == Mastery(id=6111, name="Fury", description=["a", "b"], ranks=5, prerequisite="0")


@pytest.mark.parametrize("raw,expected", [(588, 588), ("588", 588)])
def test_profile_icon_id_number_or_string(raw, expected):
    icon = ProfileIcon.from_dict({"id": raw, "image": {"full": "588.png"}})
    assert icon.id == expected
    assert icon.image.full == "588.png"


def test_profile_icon_bad_id_rejected():
    with pytest.raises(ValueError):
        ProfileIcon.from_dict({"id": "abc"})


def test_profile_icon_null_id_rejected():
    with pytest.raises(ValueError):
        ProfileIcon.from_dict({"id": None})


def test_summoner_spell_coefficient_keeps_any_value():
    spell = SummonerSpell.from_dict(
        {
            "key": "4",
            "modes": ["CLASSIC"],
            "summonerLevel": 7,
            "vars": [{"link": "@player.level", "coeff": [1, 2], "key": "f1"}],
        }
    )
    assert spell.key == "4"
    assert spell.modes == ["CLASSIC"]
    assert spell.summoner_level == 7
    assert spell.vars == [SummonerSpellVar(link="@player.level", coefficient=[1, 2], key="f1")]


def test_recommended_item_data_blocks():
    data = RecommendedItemData.from_dict(
        {
            "champion": "Ashe",
            "customPanel": None,
            "blocks": [
                {"type": "starting", "recMath": True, "items": [{"id": "1055", "count": 1, "hideCount": True}]}
            ],
        }
    )
    assert data.champion == "Ashe"
    assert data.custom_panel is None
    assert data.blocks == [
        RecommendedItemSet(type="starting", rec_math=True, items=[RecommendedItem(id="1055", count=1, hide_count=True)])
    ]


@pytest.mark.parametrize(
    "model,data",
    [
        (ChampionData, {"name": 5}),
        (ChampionDataInfo, {"attack": "high"}),
        (ChampionDataInfo, {"attack": True}),
        (ChampionDataInfo, {"attack": 1.5}),
        (ChampionDataStats, {"hp": "many"}),
        (SkinData, {"chromas": 1}),
        (Item, {"tags": "single"}),
        (Item, {"maps": ["11"]}),
    ],
)
def test_wrong_types_rejected(model, data):
    with pytest.raises(TypeError):
        model.from_dict(data)


def test_get_extended_asks_client_by_name():
    expected = ChampionDataExtended(id="champion-id", name="champion-name")
    client = _RecordingClient(champion=expected)
    data = ChampionData(id="champion-id", name="champion-name")
    assert data.get_extended(client) == expected
    assert client.calls == [("get_champion", "champion-name")]


def test_recommended_item_get_item_asks_client_by_id():
    expected = Item(id="id")
    client = _RecordingClient(item=expected)
    assert RecommendedItem(id="id").get_item(client) == expected
    assert client.calls == [("get_item", "id")]


def test_defaults_are_independent():
    first = Item()
    second = Item()
    first.tags.append("x")
    assert second.tags == []