"""Interactive console menu driving a lottery machine."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from dotenv import load_dotenv

from lottery.errors import DrawNotAvailable, InvalidName, InvalidPrizeSchedule
from lottery.services.lottery_machine import LotteryMachine

logger = logging.getLogger(__name__)

TITLE = "Lottery! Please select an option by typing the number or the name:"
OPTIONS = ("purchase", "draw", "winners", "quit")
SEPARATOR = "-" * 93


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens, one line at a time."""

    for line in stream:
        yield from line.split()


def match_option(token: str) -> str | None:
    """Map a token to a menu option by number or keyword containment."""

    for number, keyword in enumerate(OPTIONS, start=1):
        if token == str(number) or keyword in token:
            return keyword
    return None


class LotteryConsole:
    """Menu loop: purchase, draw, winners, quit."""

    def __init__(self, machine: LotteryMachine, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._machine = machine
        self._tokens = read_tokens(stdin or sys.stdin)
        self._out = stdout or sys.stdout

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out, flush=True)

    def _next_token(self) -> str | None:
        return next(self._tokens, None)

    def _print_menu(self) -> None:
        self._print(TITLE)
        for number, keyword in enumerate(OPTIONS, start=1):
            self._print(f" {number}. {keyword}")

    def _purchase(self) -> bool:
        self._print()
        self._print("Please enter the first name of the participant.")
        name = self._next_token()
        if name is None:
            return False

        try:
            number = self._machine.purchase_ticket(name)
        except DrawNotAvailable:
            self._print()
            self._print("Error: There are no more draws to be sold. Please wait for the next round!")
        except InvalidName:
            self._print()
            self._print("Error: Please enter a first name.")
        else:
            self._print()
            self._print(f"Lotto Number for {name} : {number}")
        return True

    def _draw(self) -> None:
        numbers = self._machine.draw()
        self._print()
        self._print(" ".join(str(n) for n in numbers))

    def _winners(self) -> None:
        winners = self._machine.get_latest_winners()
        self._print()
        self._print("\t".join(w.name for w in winners))
        self._print("\t".join(str(w.winnings) for w in winners))

    def run(self) -> None:
        while True:
            self._print_menu()
            token = self._next_token()
            if token is None:
                break

            option = match_option(token)
            if option == "quit":
                self._print(SEPARATOR)
                break
            if option == "purchase":
                if not self._purchase():
                    break
            elif option == "draw":
                self._draw()
            elif option == "winners":
                self._winners()
            else:
                self._print()
                self._print("Invalid option!")

            self._print(SEPARATOR)

        self._print("Thank you for using the Lottery, have a good day!")


def main(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Build a machine from the environment and run the menu loop."""

    load_dotenv()

    from lottery.config import config_mapping, get_config
    from lottery.logging_config import configure_logging
    from lottery.runtime import build_machine

    config = config_mapping(get_config())
    configure_logging(config.get("LOG_LEVEL"))

    out = stdout or sys.stdout
    try:
        machine = build_machine(config)
    except InvalidPrizeSchedule as exc:
        logger.error("Cannot start lottery: %s (%s)", exc.message, exc.details)
        print(f"Error: {exc.message}!", file=out)
        return 1

    LotteryConsole(machine, stdin=stdin, stdout=out).run()
    return 0
