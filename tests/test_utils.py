"""Tests for Hana utility modules."""

import logging

from hana.utils import get_logger


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "hana.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("hana.parser").name == "hana.parser"
        assert get_logger("hana").name == "hana"

    def test_does_not_prefix_lookalikes(self) -> None:
        assert get_logger("hanami").name == "hana.hanami"

    def test_returns_stdlib_logger(self) -> None:
        logger = get_logger("x")
        assert isinstance(logger, logging.Logger)
        assert logger is logging.getLogger("hana.x")
