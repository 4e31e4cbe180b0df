"""
Word captcha rendering.

Output is a hidden input carrying the challenge id, a text input for the
answer, and the challenge label with the word reversed:

    <input name="foo[id]" type="hidden" value="..."><input name="foo[input]" type="text">
    Please type this word backwards <b>drow</b>
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..captcha import CaptchaChallenge
from ..core import SafeHTML, raw
from ..elements import Element
from ..exceptions import InvalidArgumentError, ValidationError
from ..markup import b, fragment, input_
from .base import FormHelper
from .inputs import RESERVED

CaptchaPosition = Literal["append", "prepend"]


class CaptchaOptions(BaseModel):
    """Where the label goes relative to the inputs, and what separates them."""

    position: CaptchaPosition = "append"
    separator: str = ""


class FormCaptchaDumb(FormHelper):
    """Renders a Captcha element holding a word challenge."""

    def __init__(
        self,
        *,
        position: CaptchaPosition = "append",
        separator: str = "",
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.options = CaptchaOptions()
        self.configure(position=position, separator=separator)

    def configure(self, **kwargs: Any) -> FormCaptchaDumb:
        """Validate and apply new options."""
        try:
            self.options = CaptchaOptions(**{**self.options.model_dump(), **kwargs})
        except PydanticValidationError as exc:
            raise InvalidArgumentError(
                f"{type(self).__name__}: invalid captcha options {kwargs!r}; "
                'position must be "append" or "prepend"'
            ) from exc
        return self

    def set_captcha_position(self, position: Any) -> FormCaptchaDumb:
        return self.configure(position=position)

    def get_captcha_position(self) -> CaptchaPosition:
        return self.options.position

    def set_separator(self, separator: str) -> FormCaptchaDumb:
        return self.configure(separator=separator)

    def get_separator(self) -> str:
        return self.options.separator

    def render(self, element: Element) -> str:
        challenge = getattr(element, "captcha", None)
        if not isinstance(challenge, CaptchaChallenge):
            raise ValidationError(
                f"{type(self).__name__}.render requires that the element has a "
                '"captcha" challenge; none found'
            )
        name = self.require_name(element)

        label = fragment(
            self.escape(self.translate(challenge.label)),
            raw(" "),
            b(self.escape(challenge.word[::-1])),
        )
        inputs = self.render_captcha_inputs(element, name, challenge)
        separator = raw(self.options.separator)

        if self.options.position == "prepend":
            return fragment(label, separator, inputs).__html__()
        return fragment(inputs, separator, label).__html__()

    def render_captcha_inputs(
        self, element: Element, name: str | int, challenge: CaptchaChallenge
    ) -> SafeHTML:
        """Hidden id input followed by the text input for the answer."""
        hidden = {"name": f"{name}[id]", "type": "hidden", "value": challenge.id}
        text = {"name": f"{name}[input]", "type": "text"}
        text.update(
            (key, value) for key, value in element.attributes.items() if key not in RESERVED
        )
        return raw(input_(attrs=self.attributes_string("hidden", hidden)).__html__()) + raw(
            input_(attrs=self.attributes_string("text", text)).__html__()
        )
