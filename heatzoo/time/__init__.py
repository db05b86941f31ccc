"""Time: fixed-step stepping and output times."""

from heatzoo.time.stepper import Stepper, output_times

__all__ = [
    "Stepper",
    "output_times",
]
