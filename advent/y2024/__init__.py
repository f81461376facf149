"""Advent of Code 2024 solutions: days 1 to 14 and days 17 to 19."""