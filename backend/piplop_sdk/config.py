"""
Configuration for the Piplop client.

Values come from explicit arguments first, then environment variables
(optionally loaded from a .env file), then defaults.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:8080"

API_URL_ENV = "PIPLOP_API_URL"
API_KEY_ENV = "PIPLOP_API_KEY"


@dataclass(frozen=True)
class ClientSettings:
    api_url: str
    api_key: Optional[str] = None


def load_env() -> None:
    """Load environment variables from a .env file, if present."""
    load_dotenv()


def resolve_settings(
    api_url: Optional[str] = None,
    api_key: Optional[str] = None,
) -> ClientSettings:
    """Resolve the base URL and credential.

    An empty credential is treated the same as a missing one.
    """
    url = api_url or os.getenv(API_URL_ENV) or DEFAULT_API_URL
    key = api_key or os.getenv(API_KEY_ENV) or None
    return ClientSettings(api_url=url, api_key=key)
