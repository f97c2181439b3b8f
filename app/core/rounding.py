"""
Half-up rounding for scores and INR amounts.

Python's round() is banker's rounding (round(5302.5) == 5302); published
premium tables round halves up (5303), so every monetary and score rounding
step goes through here.
"""
import math


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
