from .ca_sacramento_owner_move_in_120_day import CA_SACRAMENTO_OWNER_MOVE_IN_120_DAY

__all__ = [
    "CA_SACRAMENTO_OWNER_MOVE_IN_120_DAY",
]
