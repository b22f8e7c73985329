"""Day 11: Monkey in the Middle."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Callable, List

DAY = 11

_MONKEY_RE = re.compile(
    r"Monkey (?P<index>\d+):\s*"
    r"Starting items:(?P<items>[\d, ]*)\s*"
    r"Operation: new = (?P<left>old|\d+) (?P<op>[+*]) (?P<right>old|\d+)\s*"
    r"Test: divisible by (?P<divisor>\d+)\s*"
    r"If true: throw to monkey (?P<if_true>\d+)\s*"
    r"If false: throw to monkey (?P<if_false>\d+)"
)


@dataclass
class Monkey:
    items: List[int]
    left: str
    op: str
    right: str
    divisor: int
    if_true: int
    if_false: int
    inspected: int = field(default=0)

    def worry(self, old: int) -> int:
        left = old if self.left == "old" else int(self.left)
        right = old if self.right == "old" else int(self.right)
        return left + right if self.op == "+" else left * right

    def target(self, level: int) -> int:
        return self.if_true if level % self.divisor == 0 else self.if_false


def parse(text: str) -> List[Monkey]:
    monkeys: List[Monkey] = []
    for match in _MONKEY_RE.finditer(text):
        if int(match["index"]) != len(monkeys):
            raise ValueError(f"Monkeys out of order at 'Monkey {match['index']}'")
        monkeys.append(
            Monkey(
                items=[int(item) for item in match["items"].split(",") if item.strip()],
                left=match["left"],
                op=match["op"],
                right=match["right"],
                divisor=int(match["divisor"]),
                if_true=int(match["if_true"]),
                if_false=int(match["if_false"]),
            )
        )
    if not monkeys:
        raise ValueError("No monkeys found in input")
    return monkeys


def monkey_business(text: str, rounds: int, relief: Callable[[int], int] | None = None) -> int:
    """Product of the two highest inspection counts after ``rounds`` rounds.

    Without ``relief`` worry levels are kept modulo the product of all the
    divisors, which leaves every divisibility test unchanged.
    """

    monkeys = parse(text)
    modulus = math.prod(monkey.divisor for monkey in monkeys)
    bound = relief or (lambda level: level % modulus)

    for _ in range(rounds):
        for monkey in monkeys:
            items, monkey.items = monkey.items, []
            monkey.inspected += len(items)
            for item in items:
                level = bound(monkey.worry(item))
                monkeys[monkey.target(level)].items.append(level)

    first, second = sorted((monkey.inspected for monkey in monkeys), reverse=True)[:2]
    return first * second


def level1(text: str) -> int:
    return monkey_business(text, 20, lambda level: level // 3)


def level2(text: str) -> int:
    return monkey_business(text, 10_000)


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
