"""Configuration reconciliation between CLI arguments and environment variables."""
