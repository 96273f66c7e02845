"""Client, data models and language codes for the Data Dragon static data service."""