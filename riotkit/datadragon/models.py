"""Data models returned by the Data Dragon service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Protocol, TypeVar

_INTEGER = re.compile(r"[+-]?[0-9]+")

_Model = TypeVar("_Model")
_Converter = Callable[[Any], Any]


def parse_integer(value: Any) -> int:
    """Parse an integer that may arrive as a JSON number or as a string of digits."""
    if isinstance(value, bool) or value is None or isinstance(value, float):
        raise ValueError(f"invalid integer {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip('"')
        if _INTEGER.fullmatch(text):
            return int(text)
    raise ValueError(f"invalid integer {value!r}")


def _type_error(expected: str, value: Any) -> TypeError:
    return TypeError(f"expected {expected}, got {type(value).__name__}")


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise _type_error("a string", value)


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise _type_error("an integer", value)


def _as_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise _type_error("a number", value)


def _as_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise _type_error("a boolean", value)


def _as_any(value: Any) -> Any:
    return value


def _list_of(convert: _Converter) -> _Converter:
    def decode(value: Any) -> list:
        if value is None:
            return []
        if not isinstance(value, list):
            raise _type_error("a list", value)
        return [convert(item) for item in value]

    return decode


def _map_of(convert: _Converter) -> _Converter:
    def decode(value: Any) -> dict:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise _type_error("an object", value)
        return {_as_str(key): convert(item) for key, item in value.items()}

    return decode


def _model(cls: type) -> _Converter:
    return cls.from_dict


def _f(key: str, convert: _Converter, empty: Callable[[], Any] | None = None) -> Any:
    """Declare a field read from the JSON key ``key`` through ``convert``."""
    factory = empty if empty is not None else (lambda: convert(None))
    return field(default_factory=factory, metadata={"json": key, "convert": convert})


def _decode(cls: type[_Model], data: Any) -> _Model:
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise _type_error("an object", data)
    values = {}
    for item in fields(cls):
        key = item.metadata.get("json")
        if key is None or key not in data:
            continue
        values[item.name] = item.metadata["convert"](data[key])
    return cls(**values)


class _ChampionSource(Protocol):
    def get_champion(self, name: str) -> "ChampionDataExtended": ...


class _ItemSource(Protocol):
    def get_item(self, item_id: str) -> "Item": ...


@dataclass
class ImageData:
    """Where an image lives and its place within a sprite."""

    full: str = _f("full", _as_str)
    sprite: str = _f("sprite", _as_str)
    group: str = _f("group", _as_str)
    x: int = _f("x", _as_int)
    y: int = _f("y", _as_int)
    w: int = _f("w", _as_int)
    h: int = _f("h", _as_int)

    @classmethod
    def from_dict(cls, data: Any) -> "ImageData":
        return _decode(cls, data)


@dataclass
class ChampionDataInfo:
    """Ratings describing a champion's play style."""

    attack: int = _f("attack", _as_int)
    defense: int = _f("defense", _as_int)
    magic: int = _f("magic", _as_int)
    difficulty: int = _f("difficulty", _as_int)

    @classmethod
    def from_dict(cls, data: Any) -> "ChampionDataInfo":
        return _decode(cls, data)


@dataclass
class ChampionDataStats:
    """Base statistics of a champion and their growth per level."""

    health_points: float = _f("hp", _as_float)
    health_points_per_level: float = _f("hpperlevel", _as_float)
    mana_points: float = _f("mp", _as_float)
    mana_points_per_level: float = _f("mpperlevel", _as_float)
    movement_speed: float = _f("movespeed", _as_float)
    armor: float = _f("armor", _as_float)
    armor_per_level: float = _f("armorperlevel", _as_float)
    spell_block: float = _f("spellblock", _as_float)
    spell_block_per_level: float = _f("spellblockperlevel", _as_float)
    attack_range: float = _f("attackrange", _as_float)
    health_point_regeneration: float = _f("hpregen", _as_float)
    health_point_regeneration_per_level: float = _f("hpregenperlevel", _as_float)
    mana_point_regeneration: float = _f("mpregen", _as_float)
    mana_point_regeneration_per_level: float = _f("mpregenperlevel", _as_float)
    critical_strike_chance: float = _f("crit", _as_float)
    critical_strike_chance_per_level: float = _f("critperlevel", _as_float)
    attack_damage: float = _f("attackdamage", _as_float)
    attack_damage_per_level: float = _f("attackdamageperlevel", _as_float)
    attack_speed_offset: float = _f("attackspeedoffset", _as_float)
    attack_speed_per_level: float = _f("attackspeedperlevel", _as_float)

    @classmethod
    def from_dict(cls, data: Any) -> "ChampionDataStats":
        return _decode(cls, data)


@dataclass
class ChampionData:
    """Summary information about a champion."""

    version: str = _f("version", _as_str)
    id: str = _f("id", _as_str)
    key: str = _f("key", _as_str)
    name: str = _f("name", _as_str)
    title: str = _f("title", _as_str)
    blurb: str = _f("blurb", _as_str)
    info: ChampionDataInfo = _f("info", _model(ChampionDataInfo))
    image: ImageData = _f("image", _model(ImageData))
    tags: list[str] = _f("tags", _list_of(_as_str))
    partype: str = _f("partype", _as_str)
    stats: ChampionDataStats = _f("stats", _model(ChampionDataStats))

    @classmethod
    def from_dict(cls, data: Any) -> "ChampionData":
        return _decode(cls, data)

    def get_extended(self, client: _ChampionSource) -> "ChampionDataExtended":
        """Fetch the full information for this champion."""
        return client.get_champion(self.name)


@dataclass
class SkinData:
    """A skin available for a champion."""

    id: str = _f("id", _as_str)
    num: int = _f("num", _as_int)
    name: str = _f("name", _as_str)
    chromas: bool = _f("chromas", _as_bool)

    @classmethod
    def from_dict(cls, data: Any) -> "SkinData":
        return _decode(cls, data)


@dataclass
class LevelTip:
    """What changes when a spell is ranked up."""

    label: list[str] = _f("label", _list_of(_as_str))
    effect: list[str] = _f("effect", _list_of(_as_str))

    @classmethod
    def from_dict(cls, data: Any) -> "LevelTip":
        return _decode(cls, data)


@dataclass
class SpellVar:
    """A scaling variable of a champion spell."""

    link: str = _f("link", _as_str)
    coefficient: float = _f("coeff", _as_float)
    key: str = _f("key", _as_str)

    @classmethod
    def from_dict(cls, data: Any) -> "SpellVar":
        return _decode(cls, data)


@dataclass
class SpellData:
    """A champion's spell."""

    id: str = _f("id", _as_str)
    name: str = _f("name", _as_str)
    description: str = _f("abstract", _as_str)
    tooltip: str = _f("tooltip", _as_str)
    leveltip: LevelTip = _f("leveltip", _model(LevelTip))
    max_rank: int = _f("maxrank", _as_int)
    cooldown: list[float] = _f("cooldown", _list_of(_as_float))
    cooldown_burn: str = _f("cooldownBurn", _as_str)
    cost: list[float] = _f("cost", _list_of(_as_float))
    cost_burn: str = _f("costBurn", _as_str)
    effect: list[list[float]] = _f("effect", _list_of(_list_of(_as_float)))
    effect_burn: list[str] = _f("effectBurn", _list_of(_as_str))
    vars: list[SpellVar] = _f("vars", _list_of(_model(SpellVar)))
    cost_type: str = _f("costType", _as_str)
    max_ammo: str = _f("maxammo", _as_str)
    range: list[float] = _f("range", _list_of(_as_float))
    range_burn: str = _f("rangeBurn", _as_str)
    image: ImageData = _f("image", _model(ImageData))
    resource: str = _f("resource", _as_str)

    @classmethod
    def from_dict(cls, data: Any) -> "SpellData":
        return _decode(cls, data)


@dataclass
class PassiveData:
    """A champion's passive ability."""

    name: str = _f("name", _as_str)
    description: str = _f("description", _as_str)
    image: ImageData = _f("image", _model(ImageData))

    @classmethod
    def from_dict(cls, data: Any) -> "PassiveData":
        return _decode(cls, data)


@dataclass
class RecommendedItem:
    """An item within a recommended item set."""

    id: str = _f("id", _as_str)
    count: int = _f("count", _as_int)
    hide_count: bool = _f("hideCount", _as_bool)

    @classmethod
    def from_dict(cls, data: Any) -> "RecommendedItem":
        return _decode(cls, data)

    def get_item(self, client: _ItemSource) -> "Item":
        """Fetch the full item this recommendation refers to."""
        return client.get_item(self.id)


@dataclass
class RecommendedItemSet:
    """A set of items used in a recommended build."""

    type: str = _f("type", _as_str)
    rec_math: bool = _f("recMath", _as_bool)
    rec_steps: bool = _f("recSteps", _as_bool)
    min_summoner_level: int = _f("minSummonerLevel", _as_int)
    max_summoner_level: int = _f("maxSummonerLevel", _as_int)
    show_if_summoner_spell: str = _f("showIfSummonerSpell", _as_str)
    hide_if_summoner_spell: str = _f("hideIfSummonerSpell", _as_str)
    items: list[RecommendedItem] = _f("items", _list_of(_model(RecommendedItem)))

    @classmethod
    def from_dict(cls, data: Any) -> "RecommendedItemSet":
        return _decode(cls, data)


@dataclass
class RecommendedItemData:
    """A build recommended for a champion."""

    champion: str = _f("champion", _as_str)
    title: str = _f("title", _as_str)
    map: str = _f("map", _as_str)
    mode: str = _f("mode", _as_str)
    custom_tag: str = _f("customTag", _as_str)
    sort_rank: int = _f("sortrank", _as_int)
    extension_page: bool = _f("extensionPage", _as_bool)
    custom_panel: Any = _f("customPanel", _as_any)
    blocks: list[RecommendedItemSet] = _f("blocks", _list_of(_model(RecommendedItemSet)))

    @classmethod
    def from_dict(cls, data: Any) -> "RecommendedItemData":
        return _decode(cls, data)


@dataclass
class ChampionDataExtended(ChampionData):
    """Full information about a champion, including lore, spells and builds."""

    skins: list[SkinData] = _f("skins", _list_of(_model(SkinData)))
    lore: str = _f("lore", _as_str)
    ally_tips: list[str] = _f("allytips", _list_of(_as_str))
    enemy_tips: list[str] = _f("enemytips", _list_of(_as_str))
    spells: list[SpellData] = _f("spells", _list_of(_model(SpellData)))
    passive: PassiveData = _f("passive", _model(PassiveData))
    recommended_items: list[RecommendedItemData] = _f(
        "recommended", _list_of(_model(RecommendedItemData))
    )

    @classmethod
    def from_dict(cls, data: Any) -> "ChampionDataExtended":
        return _decode(cls, data)


@dataclass
class ItemRune:
    """Rune information attached to an item."""

    is_rune: bool = _f("isrune", _as_bool)
    tier: int = _f("tier", _as_int)
    type: str = _f("type", _as_str)

    @classmethod
    def from_dict(cls, data: Any) -> "ItemRune":
        return _decode(cls, data)


@dataclass
class ItemGold:
    """The cost and sale value of an item."""

    base: int = _f("base", _as_int)
    total: int = _f("total", _as_int)
    sell: int = _f("sell", _as_int)
    purchasable: bool = _f("purchasable", _as_bool)

    @classmethod
    def from_dict(cls, data: Any) -> "ItemGold":
        return _decode(cls, data)


@dataclass
class ItemStats:
    """The statistics an item grants."""

    flat_hp_pool_mod: float = _f("FlatHPPoolMod", _as_float)
    r_flat_hp_mod_per_level: float = _f("rFlatHPModPerLevel", _as_float)
    flat_mp_pool_mod: float = _f("FlatMPPoolMod", _as_float)
    r_flat_mp_mod_per_level: float = _f("rFlatMPModPerLevel", _as_float)
    percent_hp_pool_mod: float = _f("PercentHPPoolMod", _as_float)
    percent_mp_pool_mod: float = _f("PercentMPPoolMod", _as_float)
    flat_hp_regen_mod: float = _f("FlatHPRegenMod", _as_float)
    r_flat_hp_regen_mod_per_level: float = _f("rFlatHPRegenModPerLevel", _as_float)
    percent_hp_regen_mod: float = _f("PercentHPRegenMod", _as_float)
    flat_mp_regen_mod: float = _f("FlatMPRegenMod", _as_float)
    r_flat_mp_regen_mod_per_level: float = _f("rFlatMPRegenModPerLevel", _as_float)
    percent_mp_regen_mod: float = _f("PercentMPRegenMod", _as_float)
    flat_armor_mod: float = _f("FlatArmorMod", _as_float)
    r_flat_armor_mod_per_level: float = _f("rFlatArmorModPerLevel", _as_float)
    percent_armor_mod: float = _f("PercentArmorMod", _as_float)
    r_flat_armor_penetration_mod: float = _f("rFlatArmorPenetrationMod", _as_float)
    r_flat_armor_penetration_mod_per_level: float = _f(
        "rFlatArmorPenetrationModPerLevel", _as_float
    )
    r_percent_armor_penetration_mod: float = _f("rPercentArmorPenetrationMod", _as_float)
    r_percent_armor_penetration_mod_per_level: float = _f(
        "rPercentArmorPenetrationModPerLevel", _as_float
    )
    flat_physical_damage_mod: float = _f("FlatPhysicalDamageMod", _as_float)
    r_flat_physical_damage_mod_per_level: float = _f(
        "rFlatPhysicalDamageModPerLevel", _as_float
    )
    percent_physical_damage_mod: float = _f("PercentPhysicalDamageMod", _as_float)
    flat_magic_damage_mod: float = _f("FlatMagicDamageMod", _as_float)
    r_flat_magic_damage_mod_per_level: float = _f("rFlatMagicDamageModPerLevel", _as_float)
    percent_magic_damage_mod: float = _f("PercentMagicDamageMod", _as_float)
    flat_movement_speed_mod: float = _f("FlatMovementSpeedMod", _as_float)
    r_flat_movement_speed_mod_per_level: float = _f(
        "rFlatMovementSpeedModPerLevel", _as_float
    )
    percent_movement_speed_mod: float = _f("PercentMovementSpeedMod", _as_float)
    r_percent_movement_speed_mod_per_level: float = _f(
        "rPercentMovementSpeedModPerLevel", _as_float
    )
    flat_attack_speed_mod: float = _f("FlatAttackSpeedMod", _as_float)
    percent_attack_speed_mod: float = _f("PercentAttackSpeedMod", _as_float)
    r_percent_attack_speed_mod_per_level: float = _f(
        "rPercentAttackSpeedModPerLevel", _as_float
    )
    r_flat_dodge_mod: float = _f("rFlatDodgeMod", _as_float)
    r_flat_dodge_mod_per_level: float = _f("rFlatDodgeModPerLevel", _as_float)
    percent_dodge_mod: float = _f("PercentDodgeMod", _as_float)
    flat_crit_chance_mod: float = _f("FlatCritChanceMod", _as_float)
    r_flat_crit_chance_mod_per_level: float = _f("rFlatCritChanceModPerLevel", _as_float)
    percent_crit_chance_mod: float = _f("PercentCritChanceMod", _as_float)
    flat_crit_damage_mod: float = _f("FlatCritDamageMod", _as_float)
    r_flat_crit_damage_mod_per_level: float = _f("rFlatCritDamageModPerLevel", _as_float)
    percent_crit_damage_mod: float = _f("PercentCritDamageMod", _as_float)
    flat_block_mod: float = _f("FlatBlockMod", _as_float)
    percent_block_mod: float = _f("PercentBlockMod", _as_float)
    flat_spell_block_mod: float = _f("FlatSpellBlockMod", _as_float)
    r_flat_spell_block_mod_per_level: float = _f("rFlatSpellBlockModPerLevel", _as_float)
    percent_spell_block_mod: float = _f("PercentSpellBlockMod", _as_float)
    flat_exp_bonus: float = _f("FlatEXPBonus", _as_float)
    percent_exp_bonus: float = _f("PercentEXPBonus", _as_float)
    r_percent_cooldown_mod: float = _f("rPercentCooldownMod", _as_float)
    r_percent_cooldown_mod_per_level: float = _f("rPercentCooldownModPerLevel", _as_float)
    r_flat_time_dead_mod: float = _f("rFlatTimeDeadMod", _as_float)
    r_flat_time_dead_mod_per_level: float = _f("rFlatTimeDeadModPerLevel", _as_float)
    r_percent_time_dead_mod: float = _f("rPercentTimeDeadMod", _as_float)
    r_percent_time_dead_mod_per_level: float = _f("rPercentTimeDeadModPerLevel", _as_float)
    r_flat_gold_per10_mod: float = _f("rFlatGoldPer10Mod", _as_float)
    r_flat_magic_penetration_mod: float = _f("rFlatMagicPenetrationMod", _as_float)
    r_flat_magic_penetration_mod_per_level: float = _f(
        "rFlatMagicPenetrationModPerLevel", _as_float
    )
    r_percent_magic_penetration_mod: float = _f("rPercentMagicPenetrationMod", _as_float)
    r_percent_magic_penetration_mod_per_level: float = _f(
        "rPercentMagicPenetrationModPerLevel", _as_float
    )
    flat_energy_regen_mod: float = _f("FlatEnergyRegenMod", _as_float)
    r_flat_energy_regen_mod_per_level: float = _f("rFlatEnergyRegenModPerLevel", _as_float)
    flat_energy_pool_mod: float = _f("FlatEnergyPoolMod", _as_float)
    r_flat_energy_mod_per_level: float = _f("rFlatEnergyModPerLevel", _as_float)
    percent_life_steal_mod: float = _f("PercentLifeStealMod", _as_float)
    percent_spell_vamp_mod: float = _f("PercentSpellVampMod", _as_float)

    @classmethod
    def from_dict(cls, data: Any) -> "ItemStats":
        return _decode(cls, data)


@dataclass
class Item:
    """An item, or a rune from before runes were reworked."""

    id: str = _f("id", _as_str)
    name: str = _f("name", _as_str)
    rune: ItemRune = _f("rune", _model(ItemRune))
    gold: ItemGold = _f("gold", _model(ItemGold))
    group: str = _f("group", _as_str)
    description: str = _f("description", _as_str)
    colloquial: str = _f("colloq", _as_str)
    plaintext: str = _f("plaintext", _as_str)
    consumed: bool = _f("consumed", _as_bool)
    stacks: int = _f("stacks", _as_int)
    depth: int = _f("depth", _as_int)
    consume_on_full: bool = _f("consumeOnFull", _as_bool)
    from_: list[str] = _f("from", _list_of(_as_str))
    into: list[str] = _f("into", _list_of(_as_str))
    special_recipe: int = _f("specialRecipe", _as_int)
    in_store: bool = _f("inStore", _as_bool)
    hide_from_all: bool = _f("hideFromAll", _as_bool)
    required_champion: str = _f("requiredChampion", _as_str)
    stats: ItemStats = _f("stats", _model(ItemStats))
    tags: list[str] = _f("tags", _list_of(_as_str))
    maps: dict[str, bool] = _f("maps", _map_of(_as_bool))

    @classmethod
    def from_dict(cls, data: Any) -> "Item":
        return _decode(cls, data)


@dataclass
class Mastery:
    """A mastery from before masteries were removed."""

    id: int = _f("id", _as_int)
    name: str = _f("name", _as_str)
    description: list[str] = _f("description", _list_of(_as_str))
    image: ImageData = _f("image", _model(ImageData))
    ranks: int = _f("ranks", _as_int)
    prerequisite: str = _f("prereq", _as_str)

    @classmethod
    def from_dict(cls, data: Any) -> "Mastery":
        return _decode(cls, data)


@dataclass
class ProfileIcon:
    """A profile icon."""

    id: int = _f("id", parse_integer, empty=int)
    image: ImageData = _f("image", _model(ImageData))

    @classmethod
    def from_dict(cls, data: Any) -> "ProfileIcon":
        return _decode(cls, data)


@dataclass
class SummonerSpellVar:
    """A scaling variable of a summoner spell; its coefficient may be of any JSON type."""

    link: str = _f("link", _as_str)
    coefficient: Any = _f("coeff", _as_any)
    key: str = _f("key", _as_str)

    @classmethod
    def from_dict(cls, data: Any) -> "SummonerSpellVar":
        return _decode(cls, data)


@dataclass
class SummonerSpell:
    """A summoner spell."""

    id: str = _f("id", _as_str)
    name: str = _f("name", _as_str)
    description: str = _f("description", _as_str)
    tooltip: str = _f("tooltip", _as_str)
    max_rank: int = _f("maxrank", _as_int)
    cooldown: list[float] = _f("cooldown", _list_of(_as_float))
    cooldown_burn: str = _f("cooldownBurn", _as_str)
    cost: list[float] = _f("cost", _list_of(_as_float))
    cost_burn: str = _f("costBurn", _as_str)
    vars: list[SummonerSpellVar] = _f("vars", _list_of(_model(SummonerSpellVar)))
    key: str = _f("key", _as_str)
    summoner_level: int = _f("summonerLevel", _as_int)
    modes: list[str] = _f("modes", _list_of(_as_str))
    cost_type: str = _f("costType", _as_str)
    max_ammo: str = _f("maxammo", _as_str)
    range: list[float] = _f("range", _list_of(_as_float))
    range_burn: str = _f("rangeBurn", _as_str)
    image: ImageData = _f("image", _model(ImageData))
    resource: str = _f("resource", _as_str)

    @classmethod
    def from_dict(cls, data: Any) -> "SummonerSpell":
        return _decode(cls, data)