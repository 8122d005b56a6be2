import httpx

from subverify.entitlement.base import BaseEntitlementGranter
from subverify.entitlement.exceptions import EntitlementGrantError
from subverify.logging.logger import Log


class HttpRoleGranter(BaseEntitlementGranter):
    """Adds a guild role to a member through the chat platform REST API."""

    def __init__(
        self,
        *,
        bot_token: str,
        guild_id: str,
        base_url: str,
        timeout_seconds: int = 10,
        client: httpx.Client | None = None,
    ) -> None:
        self._guild_id = guild_id
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers={"Authorization": f"Bot {bot_token}"},
        )

    def grant(self, requester_id: str, entitlement_ref: str) -> bool:
        try:
            self._put_role(requester_id, entitlement_ref)
        except EntitlementGrantError as exc:
            Log.error(f"Role grant for {requester_id} failed: {exc}")
            return False
        Log.info(f"Granted role {entitlement_ref} to {requester_id}")
        return True

    def _put_role(self, requester_id: str, role_id: str) -> None:
        path = f"/guilds/{self._guild_id}/members/{requester_id}/roles/{role_id}"
        try:
            response = self._client.put(path)
        except httpx.HTTPError as exc:
            raise EntitlementGrantError(f"platform network error: {exc}") from exc
        if response.is_error:
            raise EntitlementGrantError(
                f"platform returned {response.status_code}: {response.text}"
            )

    def close(self) -> None:
        self._client.close()
