"""
Bot Registry - Name-based lookup of bot implementations.

Consumed by the CLI and the HTTP layer to dispatch a request to the
bot named in it.
"""

from __future__ import annotations

from ..config import Settings
from ..engine_core.errors import BotNotFound
from .greedy_bot import GreedyBot
from .mcts_bot import MctsBot
from .policy import RandomBot, YBot


class BotRegistry:
    """
    Usage:
        registry = BotRegistry().with_bot(RandomBot()).with_bot(GreedyBot())
        bot = registry.get("greedy_bot")
    """

    def __init__(self):
        self._bots: dict[str, YBot] = {}

    def register(self, bot: YBot) -> None:
        """Add a bot; a bot with the same name is replaced."""
        self._bots[bot.name()] = bot

    def with_bot(self, bot: YBot) -> BotRegistry:
        self.register(bot)
        return self

    def find(self, name: str) -> YBot | None:
        return self._bots.get(name)

    def get(self, name: str) -> YBot:
        """Look up a bot, raising BotNotFound on a miss."""
        bot = self._bots.get(name)
        if bot is None:
            raise BotNotFound(
                f"Unknown bot: {name}. Available bots: {', '.join(self.names())}",
                context={"bot_id": name, "available": self.names()},
            )
        return bot

    def names(self) -> list[str]:
        return list(self._bots)

    def __contains__(self, name: str) -> bool:
        return name in self._bots

    def __len__(self) -> int:
        return len(self._bots)


def default_registry(settings: Settings | None = None) -> BotRegistry:
    """Registry with every built-in bot, MCTS budgets taken from settings."""
    settings = settings or Settings()
    return (
        BotRegistry()
        .with_bot(RandomBot())
        .with_bot(GreedyBot())
        .with_bot(MctsBot(
            iterations=settings.mcts_iterations,
            time_limit=settings.mcts_time_limit,
        ))
        .with_bot(MctsBot(
            iterations=settings.mcts_hard_iterations,
            time_limit=settings.mcts_time_limit,
            bot_name="mcts_bot_hard",
        ))
    )
