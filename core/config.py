# =============================================================================
# core/config.py  —  Runtime configuration for the remote API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds ONE immutable ApiConfig value from environment variables.  The MCP
#   server constructs it at start-up and hands it to the TransparenceClient.
#
# ENVIRONMENT VARIABLES:
#   TRANSPARENCE_API_URL     Base origin of the API
#                            (default: https://politic-tracker.vercel.app)
#   TRANSPARENCE_USER_AGENT  Client identification header
#                            (default: transparence-politique-mcp/1.0)
#   TRANSPARENCE_LOG_LEVEL   Log level of the MCP server (default: INFO)
#
#   A .env file is honoured: entry points call load_dotenv() before
#   ApiConfig.from_env().
# =============================================================================

import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://politic-tracker.vercel.app"
DEFAULT_USER_AGENT = "transparence-politique-mcp/1.0"

# Public website, used for the links printed at the end of detail reports.
SITE_URL = "https://politic-tracker.vercel.app"


@dataclass(frozen=True)
class ApiConfig:
    """Connection settings for the Transparence Politique API."""

    base_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Read the configuration from the process environment.

        Empty variables fall back to the defaults, so an `.env` line like
        `TRANSPARENCE_API_URL=` does not produce an unusable origin.
        """
        return cls(
            base_url=os.environ.get("TRANSPARENCE_API_URL") or DEFAULT_API_URL,
            user_agent=os.environ.get("TRANSPARENCE_USER_AGENT") or DEFAULT_USER_AGENT,
            log_level=(os.environ.get("TRANSPARENCE_LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
