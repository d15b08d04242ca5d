"""Validator configuration.

Provides ValidatorConfig, the pydantic model holding the construction-time
policy of a validator.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

__all__ = ["NO_ERROR_CODE", "NULL_VALUE_MESSAGE", "ValidatorConfig"]

NO_ERROR_CODE = "NO_ERROR_CODE"
"""Error code used when a check is attached without an explicit code."""

NULL_VALUE_MESSAGE = "value is null"
"""Message recorded when the value under validation is None."""

NULL_ERROR_CODE_MESSAGE = "The null value code must not be None."


class ValidatorConfig(BaseModel):
    """Construction-time policy for a validator.

    Attributes:
        null_value_code: Error code recorded when the value is None.
        fast_validate: If True, stop evaluating checks after the first failure.
        null_value_message: Message recorded when the value is None.

    Example:
        config = ValidatorConfig(null_value_code="ERR_NULL", fast_validate=True)
        result = (
            AppliableValidator.from_config(order, config)
            .on(lambda o: o.total < 0, "total must be non-negative", "ERR_TOTAL")
            .on_success(lambda o: o.total)
            .on_failure(lambda o, msg: 0)
        )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    null_value_code: StrictStr = NO_ERROR_CODE
    fast_validate: StrictBool = False
    null_value_message: StrictStr = NULL_VALUE_MESSAGE
