import logging
from types import MappingProxyType

from .stack import Stack

logger = logging.getLogger(__name__)

OPENING = "([{"
CLOSING = ")]}"
PAIRS = MappingProxyType({')': '(', ']': '[', '}': '{'})

BALANCED = "Balanced"
UNBALANCED = "Unbalanced"


def is_balanced(expression: str) -> bool:
    stack: Stack[str] = Stack()

    for index, char in enumerate(expression):
        if char in OPENING:
            stack.push(char)
        elif char in CLOSING:
            if stack.is_empty() or stack.pop() != PAIRS[char]:
                logger.debug(f"Несовпадение скобки {char!r} на позиции {index}")
                return False

    if not stack.is_empty():
        logger.debug(f"Остались незакрытые скобки: {stack.size()}")
        return False
    return True


def balance_message(expression: str) -> str:
    return BALANCED if is_balanced(expression) else UNBALANCED
