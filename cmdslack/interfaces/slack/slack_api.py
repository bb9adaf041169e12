# cmdslack/interfaces/slack/slack_api.py
"""Slack API utilities for response delivery and retry logic."""

import asyncio
from collections.abc import Callable
from typing import Any

MAX_RETRIES = 3
RETRY_DELAYS = [1, 2, 4]
SLACK_MESSAGE_LIMIT = 2500
# Slack accepts at most five messages per response_url
MAX_RESPONSES = 5
TRUNCATED_SUFFIX = "\n… (truncated)"


async def _slack_api_with_retry(coro_func: Callable, *args, **kwargs) -> Any:
    """Execute Slack API call with retry on timeout."""
    last_error: BaseException = TimeoutError("Max retries exceeded")
    for attempt in range(MAX_RETRIES):
        try:
            return await coro_func(*args, **kwargs)
        except (TimeoutError, asyncio.TimeoutError) as e:
            last_error = e
            if attempt < MAX_RETRIES - 1:
                await asyncio.sleep(RETRY_DELAYS[attempt])
    raise last_error


def _split_message_at_boundaries(
    text: str, limit: int = SLACK_MESSAGE_LIMIT
) -> list[str]:
    """Split message text at natural boundaries to fit Slack's message limit.

    Attempts to split at paragraph breaks, newlines, or spaces to maintain
    readability. Falls back to hard limit if no suitable break point found.
    Only the break itself is dropped, so indentation and other whitespace in
    the output survive.

    Args:
        text: Message text to split.
        limit: Maximum characters per chunk (default: SLACK_MESSAGE_LIMIT).

    Returns:
        List of text chunks, each within the character limit.
    """
    if len(text) <= limit:
        return [text]

    chunks = []
    remaining = text

    while remaining:
        if len(remaining) <= limit:
            chunks.append(remaining)
            break

        chunk = remaining[:limit]
        separator = "\n\n"
        split_at = chunk.rfind(separator)
        if split_at < limit * 0.5:
            separator = "\n"
            split_at = chunk.rfind(separator)
        if split_at < limit * 0.3:
            separator = " "
            split_at = chunk.rfind(separator)
        if split_at < limit * 0.3:
            separator = ""
            split_at = limit

        chunks.append(remaining[:split_at])
        remaining = remaining[split_at + len(separator):]

    return chunks


async def _send_multipart_response(
    respond: Callable, text: str, response_type: str = "in_channel"
) -> None:
    """Send command output through a Slack respond function, in parts if needed.

    Output longer than Slack's message limit is split at natural boundaries.
    Only the first MAX_RESPONSES parts are sent; the last one is marked as
    truncated when parts are dropped.

    Args:
        respond: Bolt respond function bound to the command's response_url.
        text: Response text.
        response_type: "in_channel" or "ephemeral".
    """
    chunks = _split_message_at_boundaries(text)
    if len(chunks) > MAX_RESPONSES:
        chunks = chunks[:MAX_RESPONSES]
        chunks[-1] += TRUNCATED_SUFFIX

    for i, chunk in enumerate(chunks):
        part_indicator = f"({i + 1}/{len(chunks)})" if len(chunks) > 1 else ""
        await _slack_api_with_retry(
            respond,
            text=f"{chunk}\n{part_indicator}" if part_indicator else chunk,
            response_type=response_type,
        )
