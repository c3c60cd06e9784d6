import logging
import sys

from .balance import BALANCED, UNBALANCED, is_balanced
from .config import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def run(expressions):
    all_balanced = True
    for expression in expressions:
        balanced = is_balanced(expression)
        print(f"{expression}: {BALANCED if balanced else UNBALANCED}")
        all_balanced = all_balanced and balanced
    return 0 if all_balanced else 1


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if argv:
        return run(argv)

    try:
        input_expression = input("Enter a string with brackets: ")
    except (EOFError, KeyboardInterrupt):
        logger.debug("Ввод прерван")
        return 1

    balanced = is_balanced(input_expression)
    print(BALANCED if balanced else UNBALANCED)
    return 0 if balanced else 1


if __name__ == "__main__":
    sys.exit(main())
