"""Rule settings exported by the shared configuration."""

from __future__ import annotations

from .schema import RuleSetting


BASE_RULES: dict[str, RuleSetting] = {
    "no-var": ["error"],
    "object-shorthand": ["warn", "properties"],
    "accessor-pairs": [
        "error",
        {
            "setWithoutGet": True,
            "getWithoutSet": False,
            "enforceForClassMembers": True,
        },
    ],
    "array-callback-return": [
        "error",
        {
            "allowImplicit": False,
            "allowVoid": False,
            "checkForEach": False,
        },
    ],
    "class-methods-use-this": ["off"],
    "constructor-super": ["error"],
    "curly": ["error", "multi-line"],
    "default-case-last": ["error"],
    "dot-notation": ["off"],
    "eqeqeq": ["error", "always", {"null": "ignore"}],
    "new-cap": ["error", {"newIsCap": True, "capIsNew": False, "properties": True}],
    "no-array-constructor": ["off"],
    "no-async-promise-executor": ["error"],
    "no-caller": ["error"],
    "no-case-declarations": ["error"],
    "no-class-assign": ["error"],
    "no-compare-neg-zero": ["error"],
    "no-cond-assign": ["error"],
    "no-const-assign": ["error"],
    "no-constant-condition": ["error", {"checkLoops": False}],
    "no-control-regex": ["error"],
    "no-debugger": ["error"],
    "no-delete-var": ["error"],
    "no-dupe-args": ["error"],
    "no-dupe-class-members": ["off"],
    "no-dupe-keys": ["error"],
    "no-duplicate-case": ["error"],
    "no-useless-backreference": ["error"],
    "no-empty": ["error", {"allowEmptyCatch": True}],
    "no-empty-character-class": ["error"],
    "no-empty-pattern": ["error"],
    "no-eval": ["error"],
    "no-ex-assign": ["error"],
    "no-extend-native": ["error"],
    "no-extra-bind": ["error"],
    "no-extra-boolean-cast": ["error"],
    "no-fallthrough": ["error"],
    "no-func-assign": ["error"],
    "no-global-assign": ["error"],
    "no-implied-eval": ["off"],
    "no-import-assign": ["error"],
    "no-invalid-regexp": ["error"],
    "no-irregular-whitespace": ["error"],
    "no-iterator": ["error"],
    "no-labels": ["error", {"allowLoop": False, "allowSwitch": False}],
    "no-lone-blocks": ["error"],
    "no-loss-of-precision": ["off"],
    "no-misleading-character-class": ["error"],
    "no-prototype-builtins": ["error"],
    "no-useless-catch": ["error"],
    "no-multi-str": ["error"],
    "no-new": ["error"],
    "no-new-func": ["error"],
    "no-new-symbol": ["error"],
    "no-new-wrappers": ["error"],
    "no-obj-calls": ["error"],
    "no-object-constructor": ["error"],
    "no-octal": ["error"],
    "no-octal-escape": ["error"],
    "no-proto": ["error"],
    "no-redeclare": ["off"],
    "no-regex-spaces": ["error"],
    "no-return-assign": ["error", "except-parens"],
    "no-self-assign": ["error", {"props": True}],
    "no-self-compare": ["error"],
    "no-sequences": ["error"],
    "no-shadow-restricted-names": ["error"],
    "no-sparse-arrays": ["error"],
    "no-template-curly-in-string": ["error"],
    "no-this-before-super": ["error"],
    "no-throw-literal": ["off"],
    "no-undef-init": ["error"],
    "no-unexpected-multiline": ["error"],
    "no-unmodified-loop-condition": ["error"],
    "no-unneeded-ternary": ["error", {"defaultAssignment": False}],
    "no-unreachable": ["error"],
    "no-unreachable-loop": ["error"],
    "no-unsafe-finally": ["error"],
    "no-unsafe-negation": ["error"],
    "no-unused-expressions": ["off"],
    "no-unused-vars": ["off"],
    "no-use-before-define": ["off"],
    "no-useless-call": ["error"],
    "no-useless-computed-key": ["error"],
    "no-useless-constructor": ["off"],
    "no-useless-escape": ["error"],
    "no-useless-rename": ["error"],
    "no-useless-return": ["error"],
    "no-void": ["error", {"allowAsStatement": True}],
    "no-with": ["error"],
    "one-var": ["error", {"initialized": "never"}],
    "prefer-const": ["error", {"destructuring": "all", "ignoreReadBeforeAssign": False}],
    "prefer-promise-reject-errors": ["off"],
    "prefer-regex-literals": ["error", {"disallowRedundantWrapping": True}],
    "symbol-description": ["error"],
    "unicode-bom": ["error", "never"],
    "use-isnan": [
        "error",
        {
            "enforceForSwitchCase": True,
            "enforceForIndexOf": True,
        },
    ],
    "valid-typeof": ["error", {"requireStringLiterals": True}],
    "yoda": ["error", "never"],
}

IMPORT_RULES: dict[str, RuleSetting] = {
    "import/export": ["error"],
    "import/first": ["error"],
    "import/no-absolute-path": ["error", {"esmodule": True, "commonjs": True, "amd": False}],
    "import/no-duplicates": ["error"],
    "import/no-named-default": ["error"],
    "import/no-webpack-loader-syntax": ["error"],
}

N_RULES: dict[str, RuleSetting] = {
    "n/handle-callback-err": ["error", "^(err|error)$"],
    "n/no-callback-literal": ["error"],
    "n/no-deprecated-api": ["error"],
    "n/no-exports-assign": ["error"],
    "n/no-new-require": ["error"],
    "n/no-path-concat": ["error"],
    "n/process-exit-as-throw": ["error"],
}

PROMISE_RULES: dict[str, RuleSetting] = {
    "promise/param-names": ["error"],
}

_OBJECT_TYPE_HINT = (
    '- If you want a type meaning "any object", you probably want `Record<string, unknown>` instead.\n'
    '- If you want a type meaning "any value", you probably want `unknown` instead.'
)

BANNED_TYPES: dict[str, dict[str, str]] = {
    "String": {"message": "Use string instead", "fixWith": "string"},
    "Boolean": {"message": "Use boolean instead", "fixWith": "boolean"},
    "Number": {"message": "Use number instead", "fixWith": "number"},
    "Symbol": {"message": "Use symbol instead", "fixWith": "symbol"},
    "BigInt": {"message": "Use bigint instead", "fixWith": "bigint"},
    "Function": {
        "message": "\n".join(
            [
                "The `Function` type accepts any function-like value.",
                "It provides no type safety when calling the function, which can be a common source of bugs.",
                "It also accepts things like class declarations, which will throw at runtime as they will not be called with `new`.",
                "If you are expecting the function to accept certain arguments, you should explicitly define the function shape.",
            ]
        ),
    },
    "Object": {
        "message": 'The `Object` type actually means "any non-nullish value", so it is marginally better than `unknown`.\n'
        + _OBJECT_TYPE_HINT,
    },
    "{}": {
        "message": '`{}` actually means "any non-nullish value".\n' + _OBJECT_TYPE_HINT,
    },
}

TYPESCRIPT_RULES: dict[str, RuleSetting] = {
    "@typescript-eslint/adjacent-overload-signatures": ["error"],
    "@typescript-eslint/array-type": ["error", {"default": "array-simple"}],
    "@typescript-eslint/await-thenable": ["error"],
    "@typescript-eslint/ban-ts-comment": [
        "error",
        {
            "ts-expect-error": "allow-with-description",
            "ts-ignore": True,
            "ts-nocheck": True,
            "ts-check": False,
            "minimumDescriptionLength": 3,
        },
    ],
    "@typescript-eslint/ban-tslint-comment": ["error"],
    "@typescript-eslint/ban-types": ["error", {"extendDefaults": False, "types": BANNED_TYPES}],
    "@typescript-eslint/class-methods-use-this": [
        "error",
        {
            "exceptMethods": [],
            "enforceForClassFields": True,
            "ignoreOverrideMethods": False,
            "ignoreClassesThatImplementAnInterface": False,
        },
    ],
    "@typescript-eslint/class-literal-property-style": ["error", "fields"],
    "@typescript-eslint/consistent-generic-constructors": ["error", "constructor"],
    "@typescript-eslint/consistent-indexed-object-style": ["error", "record"],
    "@typescript-eslint/consistent-type-assertions": [
        "error",
        {"assertionStyle": "as", "objectLiteralTypeAssertions": "never"},
    ],
    "@typescript-eslint/consistent-type-definitions": ["error", "interface"],
    "@typescript-eslint/consistent-type-exports": ["error", {"fixMixedExportsWithInlineTypeSpecifier": True}],
    "@typescript-eslint/consistent-type-imports": [
        "error",
        {
            "prefer": "type-imports",
            "disallowTypeAnnotations": True,
            "fixStyle": "inline-type-imports",
        },
    ],
    "@typescript-eslint/dot-notation": [
        "error",
        {
            "allowIndexSignaturePropertyAccess": False,
            "allowKeywords": True,
            "allowPattern": "",
            "allowPrivateClassPropertyAccess": False,
            "allowProtectedClassPropertyAccess": False,
        },
    ],
    "@typescript-eslint/explicit-function-return-type": [
        "error",
        {
            "allowExpressions": True,
            "allowHigherOrderFunctions": True,
            "allowTypedFunctionExpressions": True,
            "allowDirectConstAssertionInArrowFunctions": True,
        },
    ],
    "@typescript-eslint/method-signature-style": ["error"],
    "@typescript-eslint/naming-convention": [
        "error",
        {
            "selector": "variableLike",
            "leadingUnderscore": "allow",
            "trailingUnderscore": "allow",
            "format": ["camelCase", "PascalCase", "UPPER_CASE"],
        },
    ],
    "@typescript-eslint/no-array-constructor": ["error"],
    "@typescript-eslint/no-base-to-string": ["error"],
    "@typescript-eslint/no-confusing-void-expression": [
        "error",
        {"ignoreArrowShorthand": False, "ignoreVoidOperator": False},
    ],
    "@typescript-eslint/no-dupe-class-members": ["error"],
    "@typescript-eslint/no-dynamic-delete": ["error"],
    "@typescript-eslint/no-empty-interface": ["error", {"allowSingleExtends": True}],
    "@typescript-eslint/no-extra-non-null-assertion": ["error"],
    "@typescript-eslint/no-extraneous-class": ["error", {"allowWithDecorator": True}],
    "@typescript-eslint/no-floating-promises": ["error"],
    "@typescript-eslint/no-for-in-array": ["error"],
    "@typescript-eslint/no-implied-eval": ["error"],
    "@typescript-eslint/no-invalid-void-type": ["error"],
    "@typescript-eslint/no-loss-of-precision": ["error"],
    "@typescript-eslint/no-misused-new": ["error"],
    "@typescript-eslint/no-misused-promises": ["error"],
    "@typescript-eslint/no-namespace": ["error"],
    "@typescript-eslint/no-non-null-asserted-optional-chain": ["error"],
    "@typescript-eslint/no-non-null-assertion": ["error"],
    "@typescript-eslint/non-nullable-type-assertion-style": ["error"],
    "@typescript-eslint/no-this-alias": ["error", {"allowDestructuring": True}],
    "@typescript-eslint/no-redeclare": ["error", {"builtinGlobals": False}],
    "@typescript-eslint/no-unnecessary-type-assertion": ["error"],
    "@typescript-eslint/no-unnecessary-type-constraint": ["error"],
    "@typescript-eslint/no-unnecessary-boolean-literal-compare": ["error"],
    "@typescript-eslint/no-unsafe-argument": ["error"],
    "@typescript-eslint/no-unused-vars": [
        "error",
        {
            "args": "none",
            "caughtErrors": "none",
            "ignoreRestSiblings": True,
            "vars": "all",
        },
    ],
    "@typescript-eslint/no-use-before-define": [
        "error",
        {
            "functions": False,
            "classes": False,
            "enums": False,
            "variables": False,
            "typedefs": False,
        },
    ],
    "@typescript-eslint/no-unused-expressions": [
        "error",
        {
            "allowShortCircuit": True,
            "allowTaggedTemplates": True,
            "allowTernary": True,
            "enforceForJSX": False,
        },
    ],
    "@typescript-eslint/no-useless-constructor": ["error"],
    "@typescript-eslint/no-var-requires": ["error"],
    "@typescript-eslint/only-throw-error": ["error", {"allowThrowingAny": False, "allowThrowingUnknown": False}],
    "@typescript-eslint/prefer-function-type": ["error"],
    "@typescript-eslint/prefer-includes": ["error"],
    "@typescript-eslint/prefer-nullish-coalescing": [
        "error",
        {"ignoreConditionalTests": False, "ignoreMixedLogicalExpressions": False},
    ],
    "@typescript-eslint/prefer-optional-chain": ["error"],
    "@typescript-eslint/prefer-readonly": ["error"],
    "@typescript-eslint/prefer-reduce-type-parameter": ["error"],
    "@typescript-eslint/prefer-return-this-type": ["error"],
    "@typescript-eslint/promise-function-async": ["error"],
    "@typescript-eslint/prefer-promise-reject-errors": ["error"],
    "@typescript-eslint/restrict-plus-operands": ["error", {"skipCompoundAssignments": False}],
    "@typescript-eslint/require-array-sort-compare": ["error", {"ignoreStringArrays": True}],
    "@typescript-eslint/restrict-template-expressions": ["error", {"allowNumber": True}],
    "@typescript-eslint/return-await": ["error", "always"],
    "@typescript-eslint/strict-boolean-expressions": [
        "error",
        {
            "allowString": False,
            "allowNumber": False,
            "allowNullableObject": False,
            "allowNullableBoolean": False,
            "allowNullableString": False,
            "allowNullableNumber": False,
            "allowAny": False,
        },
    ],
    "@typescript-eslint/triple-slash-reference": ["error", {"lib": "never", "path": "never", "types": "never"}],
    "@typescript-eslint/unbound-method": ["error", {"ignoreStatic": False}],
}

RULES: dict[str, RuleSetting] = {
    **BASE_RULES,
    **IMPORT_RULES,
    **N_RULES,
    **PROMISE_RULES,
    **TYPESCRIPT_RULES,
}
