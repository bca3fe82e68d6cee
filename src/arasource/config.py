# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for source loaders."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

ARA_SCRIPT_EXTENSION: Final[str] = "ara"
ARA_DEFINITION_EXTENSION: Final[str] = "d.ara"


class LoaderConfig(BaseModel):
    """Configuration for how loaders recognise and walk source files."""

    model_config = ConfigDict(validate_assignment=True)

    script_extension: str = ARA_SCRIPT_EXTENSION
    definition_extension: str = ARA_DEFINITION_EXTENSION
    sort_entries: bool = True
    deep_supports: bool = False

    @field_validator("script_extension", "definition_extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        """Normalise an extension by removing a leading dot.

        Args:
            value: Extension supplied by the caller.

        Returns:
            str: Extension without the leading dot.

        Raises:
            ValueError: If the extension is empty.
        """

        normalized = value.strip().lstrip(".")
        if not normalized:
            raise ValueError("extension must not be empty")
        return normalized

    @model_validator(mode="after")
    def _check_definition_suffix(self) -> LoaderConfig:
        """Ensure definition files also carry the script extension.

        Returns:
            LoaderConfig: The validated configuration.

        Raises:
            ValueError: If the definition suffix does not end in the script extension.
        """

        if "." in self.script_extension:
            raise ValueError("script_extension must be a single segment")
        if not self.definition_extension.endswith(f".{self.script_extension}"):
            raise ValueError(
                f"definition_extension {self.definition_extension!r} must end with '.{self.script_extension}'",
            )
        return self

    @property
    def script_suffix(self) -> str:
        """Return the script extension as a :attr:`pathlib.PurePath.suffix`."""

        return f".{self.script_extension}"

    @property
    def definition_suffix(self) -> str:
        """Return the dotted suffix identifying definition files."""

        return f".{self.definition_extension}"


__all__ = ["ARA_DEFINITION_EXTENSION", "ARA_SCRIPT_EXTENSION", "LoaderConfig"]
