"""
Utility functions for release-readiness.
"""

from .env import get_custom_headers, get_env_list, is_env_ssl_verify, is_env_truthy
from .logging import mask_sensitive
from .urls import is_atlassian_cloud_url

__all__ = [
    "get_custom_headers",
    "get_env_list",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_env_truthy",
    "mask_sensitive",
]
