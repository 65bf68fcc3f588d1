"""Structured ``EVENT_JSON`` log lines emitted by the contracts."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

EVENT_PREFIX = "EVENT_JSON:"
EVENT_VERSION = "1.0.0"
VENEAR_STANDARD = "venear"
FT_STANDARD = "nep141"

LogSink = Callable[[str], Any]


def _optional_str(value: Optional[int]) -> Optional[str]:
    return None if value is None else str(value)


def lockup_update_data(
    account_id: str,
    lockup_version: int,
    timestamp: Optional[int],
    lockup_update_nonce: Optional[int],
    locked_near_balance: Optional[int],
) -> dict[str, Any]:
    """Return the event payload describing a lockup update.

    Timestamps, nonces and amounts are written as decimal strings; missing
    values become ``null``.
    """
    return {
        "account_id": account_id,
        "lockup_version": lockup_version,
        "timestamp": _optional_str(timestamp),
        "lockup_update_nonce": _optional_str(lockup_update_nonce),
        "locked_near_balance": _optional_str(locked_near_balance),
    }


def format_event(standard: str, event: str, data: Any) -> str:
    """Render one event as an ``EVENT_JSON:`` log line holding ``data``."""
    payload = {
        "standard": standard,
        "version": EVENT_VERSION,
        "event": event,
        "data": [data],
    }
    return EVENT_PREFIX + json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def lockup_action(
    log: LogSink,
    action: str,
    account_id: str,
    lockup_version: int,
    lockup_update_nonce: Optional[int],
    timestamp: Optional[int],
    locked_near_balance: Optional[int],
) -> None:
    """Log a lockup event under the veNEAR standard."""
    log(
        format_event(
            VENEAR_STANDARD,
            action,
            lockup_update_data(
                account_id, lockup_version, timestamp, lockup_update_nonce, locked_near_balance
            ),
        )
    )


def proposal_vote_action(
    log: LogSink,
    action: str,
    account_id: str,
    proposal_id: int,
    vote: int,
    account_balance: int,
) -> None:
    """Log a vote cast on a proposal."""
    log(
        format_event(
            VENEAR_STANDARD,
            action,
            {
                "account_id": account_id,
                "proposal_id": proposal_id,
                "vote": vote,
                "account_balance": str(account_balance),
            },
        )
    )


def approve_proposal_action(
    log: LogSink,
    action: str,
    account_id: str,
    proposal_id: int,
    voting_start_time_sec: Optional[int],
) -> None:
    """Log a reviewer's decision on a proposal."""
    log(
        format_event(
            VENEAR_STANDARD,
            action,
            {
                "account_id": account_id,
                "proposal_id": proposal_id,
                "voting_start_time_sec": voting_start_time_sec,
            },
        )
    )


def create_proposal_action(log: LogSink, action: str, proposer_id: str, proposal_id: int) -> None:
    """Log the creation of a proposal."""
    log(
        format_event(
            VENEAR_STANDARD,
            action,
            {"proposer_id": proposer_id, "proposal_id": proposal_id},
        )
    )


def ft_mint(log: LogSink, owner_id: str, amount: int) -> None:
    """Log a fungible-token mint."""
    log(
        format_event(
            FT_STANDARD,
            "ft_mint",
            {"owner_id": owner_id, "amount": str(amount), "memo": None},
        )
    )


def ft_burn(log: LogSink, owner_id: str, amount: int) -> None:
    """Log a fungible-token burn."""
    log(
        format_event(
            FT_STANDARD,
            "ft_burn",
            {"owner_id": owner_id, "amount": str(amount), "memo": None},
        )
    )