"""
Captcha challenges.

A challenge only needs `id`, `label` and `word`. Storing the expected word
between requests (session, cache) is left to the application.
"""

from __future__ import annotations

import secrets
import string
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from .validators import CaptchaWord

# No vowels or look-alike characters
WORD_ALPHABET = "".join(c for c in string.ascii_lowercase if c not in "aeiouly")


@runtime_checkable
class CaptchaChallenge(Protocol):
    """Anything exposing the three fields a captcha renderer needs."""

    @property
    def id(self) -> str: ...

    @property
    def label(self) -> str: ...

    @property
    def word(self) -> str: ...


def _generate_id() -> str:
    return secrets.token_hex(16)


class DumbCaptcha(BaseModel):
    """
    Word challenge asking the user to retype a word shown backwards.

    Usage:
        challenge = DumbCaptcha(word_length=6)
        challenge.word     # "bcdfgh"
        challenge.is_valid({"id": challenge.id, "input": "bcdfgh"})
    """

    word_length: int = Field(default=8, ge=1)
    label: str = "Please type this word backwards"
    id: str = Field(default_factory=_generate_id)
    word: str = ""

    def model_post_init(self, context: Any) -> None:
        if not self.word:
            self.word = "".join(secrets.choice(WORD_ALPHABET) for _ in range(self.word_length))

    def validator(self) -> CaptchaWord:
        return CaptchaWord(id=self.id, word=self.word)

    def is_valid(self, value: Any) -> bool:
        return self.validator().is_valid(value)
