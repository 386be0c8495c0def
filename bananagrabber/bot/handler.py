"""
Slash-command handling for the chat bot.

This is the platform-independent half of the bot: it turns a command name
and its argument into a reply string. Connecting to the chat gateway and
delivering the reply is left to the platform adapter.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from bananagrabber.config import Config
from bananagrabber.core.resolver import MediaResolver
from bananagrabber.errors import ResolutionError

logger = logging.getLogger(__name__)

PING_REPLY = "Hey, I'm alive!"
MISSING_URL_REPLY = "please provide a url"
UNKNOWN_COMMAND_REPLY = "not implemented :("


def command_definitions(config: Config) -> List[Dict[str, Any]]:
    """Slash commands to register with the chat platform."""
    return [
        {
            "name": config.bot.command_name,
            "description": "Extract the media out of a reddit link",
            "options": [
                {
                    "name": "url",
                    "description": "The reddit link",
                    "type": "string",
                    "required": True,
                }
            ],
        }
    ]


class CommandHandler:
    """Turns slash-command invocations into replies."""

    def __init__(self, config: Config, resolver_factory: Optional[Callable[[Config], MediaResolver]] = None):
        """
        Args:
            config: Application configuration, passed through to every resolver
            resolver_factory: Builds a resolver per invocation; ``MediaResolver`` by default
        """
        self.config = config
        self.resolver_factory = resolver_factory or MediaResolver

    async def handle(self, name: str, argument: Optional[str] = None) -> str:
        if name == self.config.bot.command_name:
            if not argument:
                return MISSING_URL_REPLY
            return await self.grab(argument)
        if name == "ping":
            return PING_REPLY
        return UNKNOWN_COMMAND_REPLY

    async def grab(self, reference: str) -> str:
        """Resolve ``reference``, replying with the reference itself when that fails."""
        try:
            async with self.resolver_factory(self.config) as resolver:
                media_url = await resolver.resolve(reference)
        except ResolutionError as e:
            logger.error(f"error while looking up url {reference}: {e}")
            return reference

        if media_url is None:
            logger.info(f"no media found for {reference}")
            return reference
        return media_url
