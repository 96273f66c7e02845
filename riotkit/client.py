"""Combined client for the Riot API and the Data Dragon service."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .api import Region
from .datadragon.dragon import DataDragonClient
from .riot.riot import RiotClient
from .transport import Doer, UrllibDoer


class Client:
    """A client for both the Riot API and the Data Dragon service."""

    def __init__(
        self,
        api_key: str,
        *,
        region: Any = Region.EUROPE_WEST,
        doer: Optional[Doer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.api_key = api_key
        self.region = region
        self.doer: Doer = doer if doer is not None else UrllibDoer()
        self.logger = logger if logger is not None else logging.getLogger("riotkit")
        self.riot = RiotClient(self.region, self.api_key, self.doer, self.logger)
        self.data_dragon = DataDragonClient(self.doer, self.region, self.logger)