"""Entry point bundling every Riot API endpoint client."""

from __future__ import annotations

import logging
import warnings
from typing import Any, Optional

from ..api import Region
from ..transport import APIClient, Doer
from .account import AccountClient
from .lol import ChampionClient, ChampionMasteryClient, LoLClient


class RiotClient:
    """Access to all Riot API endpoint clients, sharing one base client."""

    def __init__(
        self,
        region: Any = Region.EUROPE_WEST,
        api_key: str = "",
        doer: Optional[Doer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._base = APIClient(region, api_key, doer, logger)
        self.account = AccountClient(self._base)
        self.lol = LoLClient(self._base)

    @property
    def region(self) -> Any:
        """The region requests are sent to."""
        return self._base.region

    @property
    def champion_mastery(self) -> ChampionMasteryClient:
        """Deprecated: use ``lol.champion_mastery`` instead."""
        warnings.warn(
            "RiotClient.champion_mastery is deprecated; use RiotClient.lol.champion_mastery",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.lol.champion_mastery

    @property
    def champion(self) -> ChampionClient:
        """Deprecated: use ``lol.champion`` instead."""
        warnings.warn(
            "RiotClient.champion is deprecated; use RiotClient.lol.champion",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.lol.champion