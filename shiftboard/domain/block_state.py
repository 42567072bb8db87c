"""Block state machine.

States: open ↔ closed, either → cancelled (terminal)
"""

from shiftboard.core.exceptions import InvalidTransition

BLOCK_TRANSITIONS: dict[str, set[str]] = {
    "open": {"closed", "cancelled"},
    "closed": {"open", "cancelled"},
    "cancelled": set(),
}


def can_block_transition(current: str, target: str) -> bool:
    """Check whether a block may move from ``current`` to ``target``."""
    current = getattr(current, "value", current)
    target = getattr(target, "value", target)
    return target in BLOCK_TRANSITIONS.get(current, set())


def assert_block_transition(current: str, target: str) -> None:
    """Validate block state transition.

    Args:
        current: Current block status
        target: Target block status

    Raises:
        InvalidTransition: If transition is not allowed
    """
    if not can_block_transition(current, target):
        current = getattr(current, "value", current)
        target = getattr(target, "value", target)
        raise InvalidTransition(f"Invalid block transition: {current} → {target}")
