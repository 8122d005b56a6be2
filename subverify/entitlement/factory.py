from subverify.config.settings import Settings
from subverify.entitlement.base import BaseEntitlementGranter
from subverify.entitlement.http_granter import HttpRoleGranter
from subverify.entitlement.log_granter import LogOnlyGranter


class EntitlementGranterFactory:
    """Creates the configured entitlement granter."""

    BACKENDS = ("http", "log")

    @classmethod
    def create(cls, settings: Settings) -> BaseEntitlementGranter:
        backend = settings.entitlement_backend.lower()
        if backend == "log":
            return LogOnlyGranter()
        if backend == "http":
            return HttpRoleGranter(
                bot_token=settings.bot_token,
                guild_id=settings.guild_id,
                base_url=settings.platform_api_base_url,
                timeout_seconds=settings.platform_timeout_seconds,
            )
        raise ValueError(
            f"Unknown entitlement backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
