"""examples/basic_usage.py - Logger and inspection demo.

Demonstrates:
    Console logging with a context tag and level gating
    Shallow and detailed inspection of plain functions and methods
    A failing target: logged on the error channel, never raised

Run from inside the project so the log directory can be resolved:
    python examples/basic_usage.py
"""

from logify import (
    Logger,
    inspect_fn,
    inspect_fn_detailed,
    inspect_method,
    set_inspection_logger,
)

log = Logger(level="debug", context="payments")
set_inspection_logger(log)


def get_balance(user_id: int) -> int:
    return 3_000


def quote(user_id: int, amount: int) -> dict:
    return {"user_id": user_id, "amount": amount, "fee": round(amount * 0.01, 2)}


def pay(user_id: int, amount: int) -> None:
    if get_balance(user_id) < amount:
        raise ValueError(f"InsufficientFunds: user_id={user_id}, amount={amount}")


class Ledger:
    def __init__(self) -> None:
        self.entries = []

    def record(self, label: str, amount: int) -> int:
        self.entries.append((label, amount))
        return len(self.entries)


if __name__ == "__main__":
    log.info("starting payment run")

    inspect_fn(get_balance, 1)
    inspect_fn_detailed(quote, 1, 500)
    inspect_method(Ledger(), "record", "coffee", 4)

    log.warn("next call is expected to fail")
    inspect_fn(pay, 2, 50_000)

    log.set_level("warn")
    log.info("this line is suppressed")
    log.warn("done")
