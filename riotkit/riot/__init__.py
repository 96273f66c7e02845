"""Clients for the account, challenge, champion and mastery endpoints of the Riot Games API."""