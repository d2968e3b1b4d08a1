"""Shared constants for the dtcg-lint application.

For environment-based configuration (log level, schema hints, etc.), use the env module:
    from common.env import env
    indent = env.json_indent()
"""

# Default file name the CLI looks for when no document path is given
DEFAULT_DOCUMENT = "tokens.json"

# Encoding used for every token document read or written
DOCUMENT_ENCODING = "utf-8"
