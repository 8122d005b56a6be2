from subverify.entitlement.base import BaseEntitlementGranter
from subverify.logging.logger import Log


class LogOnlyGranter(BaseEntitlementGranter):
    """Records grants in the log without calling any platform."""

    def grant(self, requester_id: str, entitlement_ref: str) -> bool:
        Log.info(f"Granting {entitlement_ref} to {requester_id} (log only)")
        return True
