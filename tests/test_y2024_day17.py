import pytest

from advent.y2024.day17 import run_program

EXAMPLE = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0"


def _program(a: int, program: str) -> str:
    return f"Register A: {a}\nRegister B: 0\nRegister C: 0\n\nProgram: {program}"


def test_example():
    assert run_program(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_literal_and_register_outputs():
    assert run_program(_program(10, "5,0,5,1,5,4")) == "0,1,2"


def test_loop_until_a_is_zero():
    assert run_program(_program(2024, "0,1,5,4,3,0")) == "4,2,5,6,7,7,7,7,3,1,0"


def test_no_output():
    assert run_program(_program(5, "1,7")) == ""


def test_unknown_opcode_raises():
    with pytest.raises(ValueError):
        run_program(_program(1, "8,0"))


def test_missing_program_raises():
    with pytest.raises(ValueError):
        run_program("Register A: 1\nRegister B: 0\nRegister C: 0")