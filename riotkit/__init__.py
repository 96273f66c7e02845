"""Client for the Riot Games API and the Data Dragon service."""

__version__ = "0.1.0"