# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import pytest

from tests.utils import make_echo, phase_transducer
from transducers.core.validations import Validator
from transducers.examples.light import LightConfig, LightMode


@pytest.fixture
def echo_a():
    """An echo transducer tagging its outputs with "a"."""
    return make_echo("a")


@pytest.fixture
def echo_b():
    """An echo transducer tagging its outputs with "b"."""
    return make_echo("b")


@pytest.fixture
def phase():
    """A two-mode transducer over bare Enum configurations."""
    return phase_transducer


@pytest.fixture
def off_light() -> LightConfig:
    """A counting light that has never been on."""
    return LightConfig(LightMode.OFF, 0)


@pytest.fixture
def validator() -> Validator:
    """A validator using the default mode accessor."""
    return Validator()
