import copy
from dataclasses import replace

import pytest

from upright import UprightDesignInput, example_input
from upright.examples import EXAMPLE_PAYLOAD
from upright.trace import CalcTrace


@pytest.fixture
def example() -> UprightDesignInput:
    return example_input()


@pytest.fixture
def payload() -> dict:
    return copy.deepcopy(EXAMPLE_PAYLOAD)


@pytest.fixture
def trace() -> CalcTrace:
    return CalcTrace()


def with_group(design_input: UprightDesignInput, group: str, **changes) -> UprightDesignInput:
    """Copy ``design_input`` with fields of one input group replaced."""
    return replace(design_input, **{group: replace(getattr(design_input, group), **changes)})
