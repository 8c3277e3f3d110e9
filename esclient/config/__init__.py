"""
Configuration management for the Elasticsearch client.
"""

from .environments import (
    get_current_environment,
    get_elasticsearch_config,
    get_environment_config,
)

__all__ = [
    "get_current_environment",
    "get_elasticsearch_config",
    "get_environment_config",
]
