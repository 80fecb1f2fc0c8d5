"""Constants for the loader module."""

# Log component name
COMPONENT_LOADER = "loader"

# Key separator used for every logical file key
KEY_SEPARATOR = "/"

# Workspace name that keeps the default local state path
DEFAULT_ENVIRONMENT = "default"

# State source identifiers reported in metrics
STATE_SOURCE_LOCAL = "local"
STATE_SOURCE_REMOTE = "remote"
STATE_SOURCE_NONE = "none"
