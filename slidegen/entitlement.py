"""
Entitlement Resolution

Resolves a caller's account ID into an email/plan pair and enforces the
plan allow-list. Entitlement is looked up fresh on every call and never
cached.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from slidegen.config import SlideGenConfig
from slidegen.errors import EntitlementError
from slidegen.http import post_json

logger = logging.getLogger(__name__)


class Entitlement(BaseModel):
    """Resolved account entitlement.

    Attributes:
        email: Account email, forwarded to the generation service
        plan: Billing plan name as returned by the account service
        workspace_id: Optional workspace the account belongs to
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    email: str = Field(..., min_length=1)
    plan: str = Field(..., min_length=1)
    workspace_id: Optional[str] = Field(default=None, alias="workspaceId")


def resolve_entitlement(account_id: str, config: Optional[SlideGenConfig] = None) -> Entitlement:
    """Look up an account and check that its plan may generate presentations.

    Args:
        account_id: Caller identity as issued by the account service
        config: Service configuration (default: loaded from YAML/env)

    Returns:
        Entitlement for the account

    Raises:
        EntitlementError: If the lookup fails, the response is malformed,
            or the plan is not in the allowed set
    """
    config = config or SlideGenConfig.load_from_yaml()

    data = post_json(
        config.account_info_url,
        {"account_id": account_id},
        timeout=config.service_timeout,
        error_cls=EntitlementError,
    )

    if not isinstance(data, list) or not data:
        raise EntitlementError(
            "Invalid account ID. Please provide a correct account ID.",
            upstream_message=str(data)[:500],
        )

    record = data[0]
    if not isinstance(record, dict):
        raise EntitlementError("Invalid account data received. Please check your account ID.")

    try:
        entitlement = Entitlement.model_validate(record)
    except ValidationError as e:
        raise EntitlementError(
            "Invalid account data received. Please check your account ID.",
            upstream_message=str(e),
        )

    allowed = {plan.lower() for plan in config.allowed_plans}
    if entitlement.plan.lower() not in allowed:
        logger.info(f"Rejected plan '{entitlement.plan}' for account {entitlement.email}")
        raise EntitlementError(
            f"Your plan ({entitlement.plan}) does not allow generating PowerPoints. "
            f"Upgrade here: {config.pricing_url}",
            upgrade_url=config.pricing_url,
        )

    logger.debug(f"Entitlement resolved: plan={entitlement.plan}")
    return entitlement
