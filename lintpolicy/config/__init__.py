"""The shared lint configuration and the checks that keep it honest."""

from .rules import RULES
from .schema import LanguageOptions, LintConfig, RuleSetting, SEVERITIES

PARSER = "typescript-eslint/parser"

TYPESCRIPT_NAMESPACE = "@typescript-eslint"

# namespace -> plugin package
PLUGINS: dict[str, str] = {
    TYPESCRIPT_NAMESPACE: "typescript-eslint",
    "import": "eslint-plugin-import",
    "n": "eslint-plugin-n",
    "promise": "eslint-plugin-promise",
}

CONFIG = LintConfig(
    language_options=LanguageOptions(
        parser=PARSER,
        parser_options={"project": True},
    ),
    plugins=PLUGINS,
    rules=RULES,
)

__all__ = [
    "CONFIG",
    "LanguageOptions",
    "LintConfig",
    "PARSER",
    "PLUGINS",
    "RuleSetting",
    "SEVERITIES",
    "TYPESCRIPT_NAMESPACE",
]
