"""Chronospatial computer: a three-bit machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class _Computer:
    registers: list[int]
    program: list[int]
    counter: int = 0
    output: list[int] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> _Computer:
        sections = text.split("\n\n")
        if len(sections) < 2:
            raise ValueError("expected registers and program separated by a blank line")
        registers = [int(line.split(" ")[-1]) for line in sections[0].split("\n")]
        if len(registers) != 3:
            raise ValueError("expected three registers")
        program = [int(value) for value in sections[1].split(" ")[1].split(",")]
        return cls(registers, program)

    def run(self) -> Iterator[int]:
        """Execute the program, yielding each value it outputs."""
        regs = self.registers
        while self.counter < len(self.program) - 1:
            code, operand = self.program[self.counter], self.program[self.counter + 1]
            self.counter += 2
            combo = regs[operand - 4] if 4 <= operand < 7 else operand
            if code == 0:
                regs[0] = regs[0] >> combo
            elif code == 1:
                regs[1] ^= operand
            elif code == 2:
                regs[1] = combo % 8
            elif code == 3:
                if regs[0] != 0:
                    self.counter = operand
            elif code == 4:
                regs[1] ^= regs[2]
            elif code == 5:
                value = combo % 8
                self.output.append(value)
                yield value
            elif code in (6, 7):
                regs[code - 5] = regs[0] >> combo
            else:
                raise ValueError(f"unknown opcode {code}")


def run_program(text: str) -> str:
    """Run the program and return its output joined with commas."""
    computer = _Computer.parse(text)
    return ",".join(str(value) for value in computer.run())