"""
Console Session Module

Menu loop around the operation dispatcher. Input and output functions are
injected so the loop runs the same against a terminal or a test script.
"""

import sys
from typing import Callable, Optional

from .config import LedgerConfig, get_config
from .logging_config import setup_logging
from .operations import OperationCode, OperationDispatcher
from .store import InMemoryBalanceStore


SEPARATOR = "-" * 32

MENU_LINES = (
    SEPARATOR,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    SEPARATOR,
)

CHOICE_PROMPT = "Enter your choice (1-4): "
INVALID_CHOICE = "Invalid choice, please select 1-4."
GOODBYE = "Exiting the program. Goodbye!"
EXIT_CHOICE = "4"

MENU_CHOICES = {
    "1": OperationCode.VIEW,
    "2": OperationCode.CREDIT,
    "3": OperationCode.DEBIT,
}

AMOUNT_PROMPTS = {
    OperationCode.CREDIT: "Enter credit amount: ",
    OperationCode.DEBIT: "Enter debit amount: ",
}


def run_session(dispatcher: OperationDispatcher,
                input_func: Optional[Callable[[str], str]] = None,
                output_func: Optional[Callable[[str], None]] = None) -> None:
    """
    Run the interactive menu until the user exits or input ends

    Args:
        dispatcher: Dispatcher holding the account balance
        input_func: Prompt-and-read function, input() by default
        output_func: Line writer, print() by default
    """
    input_func = input_func or input
    output_func = output_func or print

    while True:
        for line in MENU_LINES:
            output_func(line)

        try:
            choice = input_func(CHOICE_PROMPT).strip()
        except EOFError:
            break

        if choice == EXIT_CHOICE:
            break

        code = MENU_CHOICES.get(choice)
        if code is None:
            output_func(INVALID_CHOICE)
            continue

        prompt = AMOUNT_PROMPTS.get(code)
        amount_provider = None
        if prompt is not None:
            amount_provider = lambda: _read_amount(input_func, prompt)

        outcome = dispatcher.execute(code, amount_provider)
        output_func(outcome.message)

    output_func(GOODBYE)


def _read_amount(input_func: Callable[[str], str], prompt: str) -> str:
    # End of input mid-operation reads as an empty, and so invalid, amount
    try:
        return input_func(prompt).strip()
    except EOFError:
        return ""


def build_dispatcher(config: Optional[LedgerConfig] = None) -> OperationDispatcher:
    """Create the store, logger and dispatcher for one process"""
    config = config or get_config()
    logger = setup_logging(config.log_level, config.log_format, config.log_file)
    store = InMemoryBalanceStore(config.initial_balance)
    logger.debug("Ledger started with balance %s", store.read())
    return OperationDispatcher(store, logger)


def main() -> int:
    """Console script entry point"""
    dispatcher = build_dispatcher()
    try:
        run_session(dispatcher)
    except KeyboardInterrupt:
        print()
        print(GOODBYE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
