"""
Discord Poster

Posts plain-text messages to a Discord channel through the bot REST API.
Every outcome reduces to a PostResult; nothing here raises on HTTP errors.
"""
from __future__ import annotations

import logging

import aiohttp

from trend_skills.config import DiscordConfig
from trend_skills.models.results import PostResult

logger = logging.getLogger(__name__)

# Discord rejects message content longer than this
MAX_MESSAGE_LENGTH = 2000


def truncate_message(content: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    """Cut content to Discord's limit, marking the cut with an ellipsis."""
    if len(content) <= limit:
        return content
    return content[:limit - 3].rstrip() + "..."


class DiscordPoster:
    """Sends message content to channels using a bot token."""

    def __init__(self, config: DiscordConfig, session: aiohttp.ClientSession) -> None:
        self._config = config
        self._session = session
        self._posted = 0

    @property
    def messages_posted(self) -> int:
        return self._posted

    async def post(self, channel_id: str, content: str) -> PostResult:
        """
        Post content to a channel.

        Returns:
            PostResult with success flag and HTTP status when one was received
        """
        if not self._config.bot_token:
            logger.error("DISCORD_BOT_TOKEN not configured")
            return PostResult.failed("No Discord token")

        if not channel_id:
            logger.error("No channel ID provided")
            return PostResult.failed("No channel ID")

        url = f"{self._config.api_base}/channels/{channel_id}/messages"
        headers = {
            "Authorization": f"Bot {self._config.bot_token}",
            "Content-Type": "application/json",
        }
        payload = {"content": truncate_message(content)}

        async with self._session.post(url, json=payload, headers=headers) as resp:
            if not 200 <= resp.status < 300:
                body = await resp.text()
                logger.error(
                    f"Discord post failed: {resp.status}",
                    extra={"channel_id": channel_id, "response": body[:200]},
                )
                return PostResult.failed(f"Discord API error: {resp.status}", status=resp.status)

        self._posted += 1
        logger.info(
            "Posted message to Discord",
            extra={"channel_id": channel_id, "length": len(payload["content"])},
        )
        return PostResult.ok(resp.status)
