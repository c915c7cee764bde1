"""Module-level constants for the Obsidian REST MCP server."""

from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "obsidian.yaml"
API_KEY_ENV = "OBSIDIAN_API_KEY"

# Local REST API defaults
DEFAULT_PROTOCOL = "https"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 27124
DEFAULT_VERIFY_SSL = False
DEFAULT_TIMEOUT = 6.0  # seconds
DEFAULT_CONTEXT_LENGTH = 100

# Content types
MARKDOWN_CONTENT_TYPE = "text/markdown"
JSONLOGIC_CONTENT_TYPE = "application/vnd.olrapi.jsonlogic+json"

# Tool identifiers
TOOL_LIST_FILES_IN_VAULT = "obsidian_list_files_in_vault"
TOOL_LIST_FILES_IN_DIR = "obsidian_list_files_in_dir"
TOOL_GET_FILE_CONTENTS = "obsidian_get_file_contents"
TOOL_BATCH_GET_FILE_CONTENTS = "obsidian_batch_get_file_contents"
TOOL_SIMPLE_SEARCH = "obsidian_simple_search"
TOOL_COMPLEX_SEARCH = "obsidian_complex_search"
TOOL_APPEND_CONTENT = "obsidian_append_content"
TOOL_PATCH_CONTENT = "obsidian_patch_content"

# Logging
LOG_LEVEL = "INFO"
