# tests/test_common.py

import logging

from mcpathgen.common import DEFAULT_GENERATION_SCHEME, setup_logging
from mcpathgen.simulation import GENERATION_SCHEMES
from mcpathgen.utils import timeit


def test_default_scheme_is_registered():
    assert DEFAULT_GENERATION_SCHEME in GENERATION_SCHEMES


def test_setup_logging_accepts_lowercase_level():
    setup_logging("debug")


def test_timeit_logs_and_returns(caplog):
    @timeit
    def add(a, b):
        return a + b

    with caplog.at_level(logging.INFO, logger="mcpathgen.utils.decorators.timing"):
        assert add(2, 3) == 5
    assert "[timing] add" in caplog.text
