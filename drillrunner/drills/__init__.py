"""Worked Python versions of the exercise topics."""