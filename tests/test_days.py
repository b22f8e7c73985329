"""Example answers for every bundled day."""

from __future__ import annotations

import importlib

import pytest

import days
from days import day06, day09, day10, day11, day13, day15

CRT_IMAGE = "\n".join(
    [
        "##..##..##..##..##..##..##..##..##..##..",
        "###...###...###...###...###...###...###.",
        "####....####....####....####....####....",
        "#####.....#####.....#####.....#####.....",
        "######......######......######......####",
        "#######.......#######.......#######.....",
    ]
)

EXAMPLES = [
    (1, 24000, 45000),
    (2, 15, 12),
    (3, 157, 70),
    (4, 2, 4),
    (5, "CMZ", "MCD"),
    (6, 7, 19),
    (7, 95437, 24933642),
    (8, 21, 8),
    (9, 13, 1),
    (10, 13140, CRT_IMAGE),
    (11, 10605, 2713310158),
    (12, 31, 29),
    (13, 13, 140),
    (14, 24, 93),
    (15, 26, 56000011),
]

# Keyword arguments that scale a day down to its published example.
EXAMPLE_SCALE = {
    15: ({"row": 10}, {"limit": 20}),
}

LARGE_ROPE = """\
R 5
U 8
L 8
D 3
R 17
D 10
L 25
U 20
"""


@pytest.mark.parametrize(("day", "first", "second"), EXAMPLES)
def test_example_answers(day: int, first, second) -> None:
    module = importlib.import_module(days.module_name(day))
    text = days.load_input(day)
    first_kwargs, second_kwargs = EXAMPLE_SCALE.get(day, ({}, {}))

    assert module.level1(text, **first_kwargs) == first
    assert module.level2(text, **second_kwargs) == second


def test_every_bundled_input_has_a_module() -> None:
    assert days.available_days() == [day for day, _, _ in EXAMPLES]


def test_rope_larger_example() -> None:
    assert day09.level2(LARGE_ROPE) == 36


def test_tuning_windows_from_other_signals() -> None:
    assert day06.level1("bvwbjplbgvbhsrlpgdmjqwftvncz") == 5
    assert day06.level1("nppdvjthqldpwncqszvftbrmjlhg") == 6
    assert day06.level2("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw") == 26


def test_tuning_without_marker_raises() -> None:
    with pytest.raises(ValueError):
        day06.first_distinct_window("aaaa", 4)


def test_packet_comparison_mixes_ints_and_lists() -> None:
    assert day13.compare([9], [[8, 7, 6]]) > 0
    assert day13.compare([[4, 4], 4, 4], [[4, 4], 4, 4, 4]) < 0
    assert day13.compare([], [3]) < 0
    assert day13.compare([[[]]], [[]]) > 0


def test_crt_trace_holds_register_during_addx() -> None:
    trace = list(day10.register_trace("noop\naddx 3\naddx -5\n"))

    assert trace == [(1, 1), (2, 1), (3, 1), (4, 4), (5, 4)]


def test_monkeys_must_be_listed_in_order() -> None:
    text = days.load_input(11).replace("Monkey 1:", "Monkey 7:")

    with pytest.raises(ValueError, match="out of order"):
        day11.parse(text)


def test_sensor_spans_merge_touching_intervals() -> None:
    assert day15.merge([(5, 8), (0, 2), (3, 4), (12, 14)]) == [(0, 8), (12, 14)]
