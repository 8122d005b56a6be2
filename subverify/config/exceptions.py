class ConfigInvalidError(Exception):
    """Raised at startup when a required option is missing or inconsistent."""
