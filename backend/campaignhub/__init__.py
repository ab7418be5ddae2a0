"""CampaignHub: contacts and campaign management API."""

__version__ = "1.0.0"
