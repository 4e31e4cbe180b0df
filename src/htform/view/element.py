"""Pick the helper for an element by its type."""

from __future__ import annotations

import logging

from ..elements import Element
from .base import FormHelper
from .captcha import FormCaptchaDumb
from .inputs import (
    FormDate,
    FormEmail,
    FormFile,
    FormHidden,
    FormMonth,
    FormNumber,
    FormRange,
    FormText,
    FormWeek,
)
from .select import FormSelect

logger = logging.getLogger(__name__)

HELPERS: dict[str, type[FormHelper]] = {
    "text": FormText,
    "email": FormEmail,
    "file": FormFile,
    "hidden": FormHidden,
    "range": FormRange,
    "number": FormNumber,
    "date": FormDate,
    "week": FormWeek,
    "month": FormMonth,
    "select": FormSelect,
    "captcha": FormCaptchaDumb,
}


class FormElement(FormHelper):
    """
    Renders any element with the helper registered for its type.

    Helpers are created lazily and share this helper's escaper, translator,
    text domain and attribute renderer. Unknown types fall back to text.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._helpers: dict[str, FormHelper] = {}

    def helper_for(self, element: Element) -> FormHelper:
        element_type = element.type if element.type in HELPERS else "text"
        if element_type not in self._helpers:
            logger.debug(f"creating {HELPERS[element_type].__name__} for {element_type} elements")
            self._helpers[element_type] = HELPERS[element_type](
                escaper=self.escaper,
                translator=self.translator,
                text_domain=self.text_domain,
                attribute_renderer=self.attribute_renderer,
            )
        return self._helpers[element_type]

    def render(self, element: Element) -> str:
        return self.helper_for(element).render(element)
