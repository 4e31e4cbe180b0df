"""
htform - HTML form elements, validator derivation and view helpers.

Elements declare their HTML attributes; validators are derived from those
attributes, and view helpers turn elements into escaped markup.

Usage:
    from htform import Select, FormSelect

    FormSelect()(Select(name="size", value="m", value_options={"s": "Small", "m": "Medium"}))
"""

from .captcha import CaptchaChallenge, DumbCaptcha
from .core import (
    GettextTranslator,
    NullTranslator,
    SafeHTML,
    attr,
    raw,
    render_attributes,
)
from .attributes import VALID_ATTRIBUTES, filter_attributes
from .elements import (
    Captcha,
    Date,
    Element,
    Email,
    File,
    Hidden,
    Month,
    Number,
    Range,
    Select,
    Text,
    Week,
    derive_validators,
)
from .exceptions import (
    ConfigurationError,
    FormError,
    InvalidArgumentError,
    ValidationError,
)
from .options import Option, OptionGroup, normalize_option
from .validators import ValidatorSpec, failed_validators, parse_interval, parse_step
from .view import (
    FormCaptchaDumb,
    FormElement,
    FormEmail,
    FormFile,
    FormSelect,
)

__version__ = "0.1.0"
__all__ = [
    # core
    "SafeHTML",
    "attr",
    "raw",
    "render_attributes",
    "NullTranslator",
    "GettextTranslator",
    # Attributes
    "VALID_ATTRIBUTES",
    "filter_attributes",
    # Elements
    "Element",
    "Text",
    "Number",
    "Range",
    "Date",
    "Week",
    "Month",
    "Email",
    "File",
    "Hidden",
    "Select",
    "Captcha",
    "derive_validators",
    # Options
    "Option",
    "OptionGroup",
    "normalize_option",
    # Validators
    "ValidatorSpec",
    "failed_validators",
    "parse_interval",
    "parse_step",
    # Captcha
    "CaptchaChallenge",
    "DumbCaptcha",
    # View helpers
    "FormElement",
    "FormSelect",
    "FormCaptchaDumb",
    "FormEmail",
    "FormFile",
    # Errors
    "FormError",
    "ConfigurationError",
    "ValidationError",
    "InvalidArgumentError",
]
