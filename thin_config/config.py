"""Central configuration constants for the Thin settings page."""

PAGE_TITLE = "Thin Configuration"
PAGE_TITLE_SIZE = 3

FEATURES_HEADING = "Features"
FEATURES_DESCRIPTION = "Turn additional features on or off."

SUBMIT_LABEL = "Save"

SCHEMA_VERSION = 1

CONFIG_JSON_FILE = "config.json"
JSON_INDENT = 2

LOGGER_NAME = "thin_config"
LOG_PREFIX = "Thin"
