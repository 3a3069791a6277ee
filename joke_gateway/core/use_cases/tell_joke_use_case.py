"""Use case for assembling a joke about a random person."""

import logging

from joke_gateway.core.exceptions import (
    JokeGatewayError,
    JokeStage,
    JokeStageError,
)
from joke_gateway.core.interfaces import JokeProvider, NameProvider
from joke_gateway.core.schemas import NamePair

logger = logging.getLogger(__name__)


class TellJokeUseCase:
    """
    Fetch a random name, then a joke about that name.

    Stages run one after the other since the joke request needs the name.
    A failed stage ends the request: nothing after it runs and nothing is
    retried.
    """

    def __init__(
        self,
        name_provider: NameProvider,
        joke_provider: JokeProvider,
    ):
        self.name_provider = name_provider
        self.joke_provider = joke_provider

    async def execute(self) -> str:
        """
        Produce one joke.

        Returns:
            Joke text exactly as returned by the joke provider

        Raises:
            JokeStageError: naming the stage that failed, with the provider
                error chained as ``__cause__``
        """
        name = await self._get_name()
        return await self._get_joke(name)

    async def _get_name(self) -> NamePair:
        try:
            return await self.name_provider.fetch_random_name()
        except JokeGatewayError as exc:
            logger.error("Failed to get name: %s", exc)
            raise JokeStageError(JokeStage.NAME) from exc
        except Exception as exc:
            logger.exception("Unexpected error getting name: %s", exc)
            raise JokeStageError(JokeStage.NAME) from exc

    async def _get_joke(self, name: NamePair) -> str:
        try:
            return await self.joke_provider.fetch_joke(name.first_name, name.last_name)
        except JokeGatewayError as exc:
            logger.error("Failed to get joke for %s: %s", name.full_name, exc)
            raise JokeStageError(JokeStage.JOKE) from exc
        except Exception as exc:
            logger.exception("Unexpected error getting joke for %s: %s", name.full_name, exc)
            raise JokeStageError(JokeStage.JOKE) from exc
