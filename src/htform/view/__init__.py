"""View helpers rendering elements to HTML."""

from .base import FormHelper
from .captcha import CaptchaOptions, FormCaptchaDumb
from .element import FormElement
from .inputs import (
    FormDate,
    FormEmail,
    FormFile,
    FormHidden,
    FormInput,
    FormMonth,
    FormNumber,
    FormRange,
    FormText,
    FormWeek,
)
from .select import FormSelect

__all__ = [
    "FormHelper",
    "FormElement",
    "FormSelect",
    "FormCaptchaDumb",
    "CaptchaOptions",
    "FormInput",
    "FormText",
    "FormEmail",
    "FormFile",
    "FormHidden",
    "FormRange",
    "FormNumber",
    "FormDate",
    "FormWeek",
    "FormMonth",
]
