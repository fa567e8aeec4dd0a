"""Configuration for order submission.

Values come from environment variables, with a project-root ``.env``
loaded first for local development. Invalid values fail at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_ENV_PATH = Path(__file__).resolve().parents[3] / ".env"

DEFAULT_ENDPOINT_URL = "https://reqres.in/api/cupcakes"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class SubmissionSettings:
    """Where orders are POSTed and how long one attempt may take.

    Attributes:
        endpoint_url: Absolute http(s) URL that echoes the posted order.
        timeout_seconds: Connect/read timeout for the single attempt.
    """

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.endpoint_url.startswith(("http://", "https://")):
            raise ValueError(
                f"CUPCAKE_ENDPOINT_URL must be an http(s) URL, got {self.endpoint_url!r}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"CUPCAKE_TIMEOUT_SECONDS must be positive, got {self.timeout_seconds}"
            )

    @classmethod
    def from_env(cls) -> SubmissionSettings:
        """Load settings from the environment (after reading ``.env``)."""
        load_dotenv(dotenv_path=_ENV_PATH)

        endpoint_url = os.getenv("CUPCAKE_ENDPOINT_URL", DEFAULT_ENDPOINT_URL)
        timeout_str = os.getenv("CUPCAKE_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            timeout_seconds = float(timeout_str)
        except ValueError:
            raise ValueError(
                f"CUPCAKE_TIMEOUT_SECONDS must be a number, got {timeout_str!r}"
            )

        return cls(endpoint_url=endpoint_url, timeout_seconds=timeout_seconds)
