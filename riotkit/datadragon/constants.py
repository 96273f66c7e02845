"""Language codes and URL templates for the Data Dragon service."""

from __future__ import annotations

from enum import Enum

BASE_URL = "ddragon.leagueoflegends.com"
DATA_URL_FORMAT = BASE_URL + "/cdn/{version}/data/{language}"
IMAGE_URL_FORMAT = BASE_URL + "/cdn/{version}/img"


class LanguageCode(str, Enum):
    """A language the Data Dragon service provides data in."""

    CZECH_REPUBLIC = "cs_CZ"
    GREECE = "el_GR"
    POLAND = "pl_PL"
    ROMANIA = "ro_RO"
    HUNGARY = "hu_HU"
    UNITED_KINGDOM = "en_GB"
    GERMANY = "de_DE"
    SPAIN = "es_ES"
    ITALY = "it_IT"
    FRANCE = "fr_FR"
    JAPAN = "ja_JP"
    KOREA = "ko_KR"
    MEXICO = "es_MX"
    ARGENTINA = "es_AR"
    BRAZIL = "pt_BR"
    UNITED_STATES = "en_US"
    AUSTRALIA = "en_AU"
    RUSSIA = "ru_RU"
    TURKEY = "tr_TR"
    MALAYSIA = "ms_MY"
    REPUBLIC_OF_THE_PHILIPPINES = "en_PH"
    SINGAPORE = "en_SG"
    THAILAND = "th_TH"
    VIETNAM = "vi_VN"
    INDONESIA = "id_ID"
    MALAYSIA_CHINESE = "zh_MY"
    CHINA = "zh_CN"
    TAIWAN = "zh_TW"

    def __str__(self) -> str:
        return self.value


LANGUAGE_CODES: tuple[LanguageCode, ...] = tuple(LanguageCode)