from .balance import PAIRS, balance_message, is_balanced
from .stack import Stack

__all__ = ["PAIRS", "Stack", "balance_message", "is_balanced"]
