"""Environment configuration interface for dtcg-lint.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def require_schema() -> bool:
        """Whether a document without a root $schema should be warned about.

        Returns:
            True unless DTCG_REQUIRE_SCHEMA is set to a falsy value
        """
        return os.getenv("DTCG_REQUIRE_SCHEMA", "true").strip().lower() in _TRUTHY

    @staticmethod
    def json_indent() -> int:
        """Get the indentation used when writing JSON documents.

        Returns:
            Indent width, defaults to 2
        """
        return int(os.getenv("DTCG_JSON_INDENT", "2"))

    @staticmethod
    def schema_url() -> str:
        """Get the schema URL suggested for documents missing $schema.

        Returns:
            Schema URL, defaults to the DTCG format page
        """
        return os.getenv("DTCG_SCHEMA_URL", "https://tr.designtokens.org/format/")


# Singleton instance for convenient access
env = Environment()
