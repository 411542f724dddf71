"""
Tests for the with_fallback helper.
"""

import logging
from unittest.mock import AsyncMock

import pytest

from mantle_operator.utils.fallback import with_fallback
from mantle_operator.utils.logging import get_logger


class TestWithFallback:
    """Tests for with_fallback()."""

    @pytest.mark.asyncio
    async def test_returns_result_on_success(self) -> None:
        fn = AsyncMock(return_value=42)

        result = await with_fallback(fn, 0, label="answer")

        assert result == 42
        fn.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_returns_fallback_on_error(self) -> None:
        fn = AsyncMock(side_effect=ConnectionError("rpc down"))

        result = await with_fallback(fn, "TOKEN", label="symbol read")

        assert result == "TOKEN"

    @pytest.mark.asyncio
    async def test_logs_failure_with_context(self, caplog) -> None:
        fn = AsyncMock(side_effect=TimeoutError("slow node"))
        logger = get_logger("tests.fallback")

        with caplog.at_level(logging.WARNING, logger="mantle_operator"):
            await with_fallback(
                fn,
                0,
                label="Balance read",
                logger=logger,
                context={"address": "0xabc"},
            )

        record = caplog.records[-1]
        assert record.getMessage() == "Balance read failed, using fallback"
        assert record.address == "0xabc"
        assert record.error == "slow node"
        assert record.error_type == "TimeoutError"
        assert record.fallback == "0"

    @pytest.mark.asyncio
    async def test_custom_level(self, caplog) -> None:
        fn = AsyncMock(side_effect=ValueError("bad"))

        with caplog.at_level(logging.DEBUG, logger="mantle_operator"):
            await with_fallback(fn, None, label="decimals read", level=logging.DEBUG)

        assert caplog.records[-1].levelno == logging.DEBUG

    @pytest.mark.asyncio
    async def test_unlisted_errors_propagate(self) -> None:
        fn = AsyncMock(side_effect=KeyError("missing"))

        with pytest.raises(KeyError):
            await with_fallback(fn, 0, label="lookup", errors=(ValueError,))
