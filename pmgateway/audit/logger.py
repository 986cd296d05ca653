"""
Audit trail for payment method operations.

Every gateway operation emits one structured INFO line with:
  - Action (what was attempted, e.g. "payment_method_grant")
  - Token (masked; payment method tokens are credentials-adjacent)
  - Details (path, option keys, resolved variant)

Nothing is persisted; records go to the ``pmgateway.audit`` logger and are
routed wherever the host application's logging config sends them.
"""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger("pmgateway.audit")


def mask_token(token: Optional[str]) -> str:
    """Keep the last four characters of a token, mask the rest."""
    if not token:
        return "-"
    token = str(token)
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]


def log_event(
    action: str,
    token: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
) -> None:
    """
    Emit an audit log line.

    Args:
        action: What happened (e.g. "payment_method_create", "payment_method_delete").
        token: Payment method token the action targets, if any.
        details: Arbitrary context (serialized to JSON, truncated).
    """
    logger.info(
        "AUDIT | action=%s token=%s | %s",
        action,
        mask_token(token),
        json.dumps(details, default=str)[:200] if details else "",
    )
