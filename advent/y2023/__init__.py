"""Advent of Code 2023 solutions: days 1 to 13 and day 15."""