"""
Environment configuration management.

Values are read from environment variables on every call, so a .env file
loaded after import is still honored.
"""

import os
from typing import Dict, Any


DEFAULT_URL = "http://localhost:9200"


def get_current_environment() -> str:
    """
    Get the current environment name.

    Returns:
        Name taken from ELASTIC_ENVIRONMENT, or 'default'
    """
    return os.getenv("ELASTIC_ENVIRONMENT", "default")


def get_environment_config() -> Dict[str, Any]:
    """
    Get configuration for the current environment.

    Returns:
        Environment configuration dictionary
    """
    return {
        "name": get_current_environment(),
        "elasticsearch": {
            "url": os.getenv("ELASTIC_URL", os.getenv("ELASTICSEARCH_URL", DEFAULT_URL)),
        },
    }


def get_elasticsearch_config() -> Dict[str, Any]:
    """
    Get Elasticsearch configuration.

    Returns:
        Elasticsearch configuration dictionary
    """
    return get_environment_config()["elasticsearch"]
