"""External REST API authenticated by project API keys."""
