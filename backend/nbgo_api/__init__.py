"""
NBGO HTTP API.

Thin HTTP front-end exposing health, provider listing and status
endpoints over a provider registry and a configuration manager.
"""
__version__ = "1.0.0"
