"""Shared fixtures for the kernel tests."""

import math

import pytest

from mvcalc import CalculusKernel, FunctionEvaluator, SympyEvaluator


@pytest.fixture
def sympy_evaluator():
    return SympyEvaluator()


@pytest.fixture
def stub_evaluator():
    """In-memory evaluator with a few named functions, no parsing involved."""
    return FunctionEvaluator({
        "bowl": lambda x, y: x ** 2 + y ** 2,
        "saddle": lambda x, y: x ** 2 - y ** 2,
        "cap": lambda x, y: -(x ** 2) - y ** 2,
        "cubic": lambda x: x ** 3,
        "sum": lambda x, y: x + y,
        "ratio": lambda x, y: x * y / (x ** 2 + y ** 2),
        "root": lambda x: math.sqrt(x),
        "nowhere": lambda x, y: 1 / 0,
    })


@pytest.fixture
def kernel():
    return CalculusKernel()


@pytest.fixture
def stub_kernel(stub_evaluator):
    return CalculusKernel(evaluator=stub_evaluator)
