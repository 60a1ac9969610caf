import pytest

from fivewords.util import count_str, int_comma, time_str


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "0.000s"), (4.2714, "4.271s"), (59.9994, "59.999s"), (60, "0:01:00"), (3725.5, "1:02:05")],
)
def test_time_str(seconds, expected):
    assert time_str(seconds) == expected


def test_int_comma():
    assert int_comma(999) == "999"
    assert int_comma(1234567) == "1,234,567"


def test_count_str():
    assert count_str(1, "solution") == "1 solution"
    assert count_str(0, "solution") == "0 solutions"
    assert count_str(12_972, "word") == "12,972 words"
    assert count_str(2, "match", "matches") == "2 matches"
