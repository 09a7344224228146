from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


SEVERITIES: tuple[str, ...] = ("off", "warn", "error")

# [severity] or [severity, *options]
RuleSetting = list[Any]


@dataclass(frozen=True)
class LanguageOptions:
    parser: str
    parser_options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LintConfig:
    language_options: LanguageOptions
    plugins: dict[str, str] = field(default_factory=dict)
    rules: dict[str, RuleSetting] = field(default_factory=dict)
