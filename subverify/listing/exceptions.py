class ListingAccessDeniedError(Exception):
    """Raised when someone other than the owner asks for the subscriber list."""
