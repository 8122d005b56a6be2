from abc import ABC, abstractmethod


class BaseEntitlementGranter(ABC):
    """Contract for adapters that give a verified user their role."""

    @abstractmethod
    def grant(self, requester_id: str, entitlement_ref: str) -> bool:
        """Grant the entitlement to the requester.

        Returns:
            True on success, False if the grant failed. Failures are logged
            by the adapter and never raised.
        """
