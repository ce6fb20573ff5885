"""Escaping configuration.

This module provides the options an escaping policy is built with.
"""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class EscapeConfig(BaseModel):
    """Configuration for an escaping policy.

    Attributes:
        scalar_bypass: Return exact ``int``, ``float``, ``bool`` and ``None``
            values as safe text without scanning them. Their default text
            forms never contain escapable characters. Turn this off when
            numbers are formatted with custom separators. Default is True.
        none_as_empty: Render ``None`` as an empty safe value instead of
            ``"None"``. Default is False.

    """

    model_config = ConfigDict(frozen=True)

    scalar_bypass: bool = Field(default=True)
    none_as_empty: bool = Field(
        default=False,
        description="Render None as empty safe text instead of 'None'",
    )
