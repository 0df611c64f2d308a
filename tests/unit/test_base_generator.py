"""BaseGenerator tests: single Claude call helper and operation logging."""

import logging

import pytest

from scope_engine.exceptions import ClaudeClientError
from scope_engine.layers import BaseGenerator
from scope_engine.services import CompletionResult


class DemoGenerator(BaseGenerator):
    _generator_name = "DemoGenerator"


@pytest.fixture
def generator(mock_claude_client, settings):
    return DemoGenerator(claude_client=mock_claude_client, settings=settings)


async def test_call_claude_returns_text(generator, mock_claude_client):
    mock_claude_client.complete.return_value = CompletionResult(text="hello")

    text = await generator._call_claude("S", "U", max_tokens=100, temperature=0.5)

    assert text == "hello"
    mock_claude_client.complete.assert_awaited_once_with(
        system_prompt="S",
        user_prompt="U",
        max_tokens=100,
        temperature=0.5,
    )


async def test_call_claude_propagates_failure(generator, mock_claude_client):
    mock_claude_client.complete.side_effect = ClaudeClientError("down")

    with pytest.raises(ClaudeClientError):
        await generator._call_claude("S", "U", max_tokens=100, temperature=0.5)


async def test_operation_logs_start_and_finish(generator, caplog):
    with caplog.at_level(logging.INFO, logger="scope_engine.layers.base_generator"):
        async with generator._operation("demo"):
            pass

    assert "[DemoGenerator:demo] started" in caplog.text
    assert "[DemoGenerator:demo] finished" in caplog.text


async def test_operation_logs_and_reraises_failure(generator, caplog):
    with caplog.at_level(logging.ERROR, logger="scope_engine.layers.base_generator"):
        with pytest.raises(ValueError):
            async with generator._operation("demo"):
                raise ValueError("boom")

    assert "[DemoGenerator:demo] failed" in caplog.text
    assert "ValueError: boom" in caplog.text


def test_settings_are_injected(generator, settings):
    assert generator.settings is settings
