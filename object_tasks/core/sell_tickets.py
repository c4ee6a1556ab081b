"""Ticket Seller — can a queue be served when the till starts empty?

Invariants:
    - Ticket price is 25; customers pay with 25, 50 or 100
    - Till is local to one call (never module state) and only holds 25s and 50s
    - Change for 100 breaks a 50 first, then fills the rest with 25s
    - First customer who cannot get exact change ends the run with False

Design Decisions:
    - Greedy rule matches the ticket window's behavior; it is not a search
    - Unknown bills fall through to the 25 branch, as the window always did
"""

from collections.abc import Iterable
from dataclasses import dataclass

from object_tasks.core.domain_types import Bill, TICKET_PRICE


@dataclass
class Till:
    """Bills held for change, by denomination."""
    twenty_fives: int = 0
    fifties: int = 0

    def accept_fifty(self) -> bool:
        if self.twenty_fives == 0:
            return False
        self.twenty_fives -= 1
        self.fifties += 1
        return True

    def accept_hundred(self) -> bool:
        rest = Bill.HUNDRED - TICKET_PRICE
        fifties_used = 0
        twenty_fives_used = 0
        if self.fifties:
            rest -= Bill.FIFTY
            fifties_used = 1
        while rest > 0 and twenty_fives_used < self.twenty_fives:
            rest -= Bill.TWENTY_FIVE
            twenty_fives_used += 1
        if rest != 0:
            return False
        self.fifties -= fifties_used
        self.twenty_fives -= twenty_fives_used
        return True


def sell_tickets(queue: Iterable[int]) -> bool:
    """True if every customer in the queue gets a ticket and exact change.

    >>> sell_tickets([25, 25, 50])
    True
    >>> sell_tickets([25, 100])
    False
    """
    till = Till()
    for bill in queue:
        if bill == Bill.HUNDRED:
            if not till.accept_hundred():
                return False
        elif bill == Bill.FIFTY:
            if not till.accept_fifty():
                return False
        else:
            till.twenty_fives += 1
    return True
