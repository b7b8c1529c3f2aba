"""Frame capture settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from functools import cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ENV_PREFIX = "BASE_ERROR_"


class CaptureSettings(BaseModel):
    """Settings used by frame capture.

    Read once at startup and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    OWN_PACKAGES: frozenset[str] = frozenset({"base_error"})
    SCAN_CEILING: int = Field(default=15, ge=1)
    TEST_MODULE_PREFIXES: tuple[str, ...] = ("test_",)
    TEST_MODULE_SUFFIXES: tuple[str, ...] = ("_test",)
    TEST_MODULE_NAMES: frozenset[str] = frozenset({"tests", "conftest"})

    @field_validator(
        "OWN_PACKAGES",
        "TEST_MODULE_PREFIXES",
        "TEST_MODULE_SUFFIXES",
        "TEST_MODULE_NAMES",
        mode="before",
    )
    @classmethod
    def split_csv(cls, value: object) -> object:
        """Accept comma separated strings from the environment."""
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("OWN_PACKAGES")
    @classmethod
    def require_packages(cls, value: frozenset[str]) -> frozenset[str]:
        """Own packages can't be empty."""
        if not value:
            raise ValueError("at least one own package is required")
        return value

    def is_own_module(self, module: str) -> bool:
        """Check whether a dotted module name belongs to the package."""
        return any(
            module == package or module.startswith(package + ".")
            for package in self.OWN_PACKAGES
        )

    def is_test_module(self, module: str) -> bool:
        """Check whether a dotted module name looks like a test module."""
        for part in module.split("."):
            if part in self.TEST_MODULE_NAMES:
                return True
            if part.startswith(self.TEST_MODULE_PREFIXES):
                return True
            if part.endswith(self.TEST_MODULE_SUFFIXES):
                return True
        return False

    def skips(self, module: str) -> bool:
        """Return True for frames that capture must step over."""
        return self.is_own_module(module) and not self.is_test_module(module)

    @classmethod
    def from_os(cls) -> "CaptureSettings":
        """Get cls from environ."""
        values = {
            key.removeprefix(_ENV_PREFIX): value
            for key, value in os.environ.items()
            if key.startswith(_ENV_PREFIX)
            and key.removeprefix(_ENV_PREFIX) in cls.model_fields
        }
        return cls(**values)


@cache
def get_settings() -> CaptureSettings:
    """Return process wide settings, built on first use."""
    return CaptureSettings.from_os()
