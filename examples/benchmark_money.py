"""Micro benchmark of every `Money` operation.

Each case is timed in 5 iterations of 500 calls; the summary is printed as a table.
Requires the `examples` extra (pandas).
"""
from __future__ import annotations

import timeit
from typing import Callable

import pandas as pd

from suite_money import Money

ITERATIONS = 5
REVS = 500


def _cases() -> dict[str, Callable[[], object]]:
    return {
        "abs": lambda: Money(10, "USD").abs(),
        "add": lambda: Money(10, "USD").add(Money(10, "USD")),
        "divide": lambda: Money(10, "USD").divide(3),
        "format": lambda: Money(10, "USD").format(),
        "format_for_accounting": lambda: Money(10, "USD").format_for_accounting(),
        "format_shorthand": lambda: Money(10, "USD").format_shorthand(),
        "format_with_sign": lambda: Money(10, "USD").format_with_sign(),
        "get_rounded_amount": lambda: Money(10.222222, "USD").get_rounded_amount(),
        "inv": lambda: Money(10, "USD").inv(),
        "multiply": lambda: Money(10, "USD").multiply(3),
        "percentage": lambda: Money(10, "USD").percentage(33.3),
        "round": lambda: Money(10, "USD").round(),
        "split(round=True)": lambda: Money(10, "USD").split([100 / 3, 25], True),
        "split(round=False)": lambda: Money(10, "USD").split([100 / 3, 25], False),
        "sub": lambda: Money(10, "USD").sub(Money(10, "USD")),
    }


def run_benchmark() -> pd.DataFrame:
    """Time all cases and return one row per case with microseconds per call."""
    rows = []
    for name, case in _cases().items():
        timings = timeit.repeat(case, number=REVS, repeat=ITERATIONS)
        per_call_us = [t / REVS * 1_000_000 for t in timings]
        rows.append({"case": name, "best_us": min(per_call_us), "mean_us": sum(per_call_us) / len(per_call_us)})
    return pd.DataFrame(rows).set_index("case").sort_values("mean_us")


if __name__ == "__main__":
    print(run_benchmark().round(2).to_string())
