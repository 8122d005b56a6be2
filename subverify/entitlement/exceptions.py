class EntitlementGrantError(Exception):
    """Raised when the platform refuses or fails to grant a role."""
