"""Game-over commentary from a chat model, with a local fallback.

:func:`generate_commentary` never raises: a missing API key, a rate limit, a
network error or an empty reply all produce one of ``FALLBACK_MESSAGES``.
:class:`CommentaryFetcher` runs the request on a daemon thread so the pygame
loop can keep drawing the game-over screen while it waits.
"""

from __future__ import annotations

import asyncio
import logging
import random
import threading
from typing import Optional

import openai
from openai import AsyncOpenAI

from striker.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

FALLBACK_MESSAGES = [
    "Wah! Kya shot tha guru!",
    "Arre bhai, thoda aaram se!",
    "Gully Cricket Legend in the making!",
    "Beta tumse na ho payega...",
    "Oooof! Close one!",
    "Next level skills bhai!",
    "Jalwa hai tumhara yahan!",
    "Focus, Focus! Agli baar pakka goal.",
    "Solid effort, but keeper was awake!",
    "Kya baat hai! Zabardast!",
]

COMMENTARY_SYSTEM = (
    "You are a funny, energetic Indian street football commentator. "
    "Reply with ONE short, punchy sentence in Hinglish (Hindi + English mix), "
    "culturally relevant to Indian street sports."
)


def fallback_commentary(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(FALLBACK_MESSAGES)


def build_prompt(score: int, style_points: int) -> str:
    return (
        "A player just finished a game of 'Desi Street Striker'.\n"
        f"Score: {score} goals.\n"
        f"Style Points: {style_points}.\n"
        "If the score is low (<3), roast them gently (e.g. 'Beta tumse na ho payega'). "
        "If the score is high (>10), praise them like a god (e.g. 'Arre Messi bhai aap yahan?')."
    )


def make_client(config: Settings) -> Optional[AsyncOpenAI]:
    """Build an OpenAI client, or ``None`` when no API key is configured."""

    if not config.commentary_enabled:
        return None
    return AsyncOpenAI(
        api_key=config.openai_api_key,
        base_url=config.openai_base_url,
        timeout=config.commentary_timeout,
        max_retries=0,
    )


async def generate_commentary(
    score: int,
    style_points: int,
    client: Optional[AsyncOpenAI] = None,
    config: Optional[Settings] = None,
) -> str:
    """Return a one-line reaction to the final score."""

    config = config or default_settings
    if client is None:
        client = make_client(config)
    if client is None:
        return fallback_commentary()

    try:
        response = await client.chat.completions.create(
            model=config.openai_model,
            messages=[
                {"role": "system", "content": COMMENTARY_SYSTEM},
                {"role": "user", "content": build_prompt(score, style_points)},
            ],
            temperature=0.9,
            max_tokens=config.commentary_max_tokens,
        )
        content = (response.choices[0].message.content or "").strip()
        if not content:
            raise ValueError("Empty commentary response")
        return content
    except openai.RateLimitError:
        logger.warning("Commentary quota exceeded (429); using fallback commentary")
    except Exception:
        logger.exception("Commentary request failed; using fallback commentary")
    return fallback_commentary()


class CommentaryFetcher:
    """Fetch commentary on a background thread and expose the result.

    ``client`` is only for tests; in the game the client is built inside the
    worker thread so it belongs to that thread's event loop.
    """

    def __init__(
        self,
        score: int,
        style_points: int,
        config: Optional[Settings] = None,
        enabled: bool = True,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self.score = score
        self.style_points = style_points
        self.config = config or default_settings
        self.enabled = enabled
        self.client = client
        self._lock = threading.Lock()
        self._result: Optional[str] = None
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        if self.enabled:
            text = asyncio.run(generate_commentary(self.score, self.style_points, self.client, self.config))
        else:
            text = fallback_commentary()
        with self._lock:
            self._result = text

    @property
    def result(self) -> Optional[str]:
        """The commentary once available, ``None`` while still loading."""

        with self._lock:
            return self._result

    def wait(self, timeout: Optional[float] = None) -> Optional[str]:
        self._thread.join(timeout)
        return self.result
