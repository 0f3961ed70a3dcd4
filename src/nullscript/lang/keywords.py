from __future__ import annotations


# Category slug -> (title, alias -> canonical). Order is display order.
KEYWORD_CATEGORIES: tuple[tuple[str, str, tuple[tuple[str, str], ...]], ...] = (
    (
        "control-flow",
        "Control Flow",
        (
            ("checkthis", "if"),
            ("orelse", "else"),
            ("loopin", "for"),
            ("whilevibe", "while"),
            ("switchup", "switch"),
            ("whenits", "case"),
            ("otherwise", "default"),
            ("keepgoing", "continue"),
            ("stopit", "break"),
        ),
    ),
    (
        "error-handling",
        "Error Handling",
        (
            ("oops", "try"),
            ("mybad", "catch"),
            ("anyway", "finally"),
        ),
    ),
    (
        "variables",
        "Variable Declarations",
        (
            ("maybe", "let"),
            ("definitely", "const"),
            ("mayhap", "var"),
        ),
    ),
    (
        "imports",
        "Import/Export",
        (
            ("gimme", "import"),
            ("yeet", "export"),
        ),
    ),
    (
        "types",
        "Type Declarations",
        (
            ("vibes", "interface"),
            ("vibe", "type"),
            ("mood", "enum"),
            ("bigbrain", "class"),
        ),
    ),
    (
        "values",
        "Values",
        (
            ("fr", "true"),
            ("cap", "false"),
            ("nocap", "null"),
            ("ghost", "undefined"),
            ("sus", "any"),
        ),
    ),
    (
        "objects",
        "Object and Context",
        (
            ("dis", "this"),
            ("parent", "super"),
            ("fresh", "new"),
            ("remove", "delete"),
        ),
    ),
    (
        "operators",
        "Operators and Expressions",
        (
            ("and", "&&"),
            ("or", "||"),
            ("not", "!"),
            ("is", "==="),
            ("aint", "!=="),
            ("bigger", ">"),
            ("smaller", "<"),
            ("biggereq", ">="),
            ("smallereq", "<="),
        ),
    ),
    (
        "functions",
        "Functions",
        (("pls", "return"),),
    ),
    (
        "keywords",
        "Other Keywords",
        (
            ("with", "with"),
            ("in", "in"),
            ("of", "of"),
            ("as", "as"),
            ("from", "from"),
        ),
    ),
    (
        "multi-word",
        "Multi-word Aliases",
        (("orsomething", "else if"),),
    ),
    (
        "function-declarations",
        "Function Declarations",
        (
            ("feels async", "async function"),
            ("feels", "function"),
        ),
    ),
)

FUNCTION_DECLARATION_CATEGORY = "function-declarations"
FUNCTION_ALIAS = "feels"
ASYNC_FUNCTION_ALIAS = "feels async"
DELETE_ALIAS = "remove"
CLASS_ALIAS = "bigbrain"

# Words that may lead an assignment-shaped line without being aliases.
PASSTHROUGH_CONNECTORS = ("export", "import", "from", "as")


__all__ = [
    "ASYNC_FUNCTION_ALIAS",
    "CLASS_ALIAS",
    "DELETE_ALIAS",
    "FUNCTION_ALIAS",
    "FUNCTION_DECLARATION_CATEGORY",
    "KEYWORD_CATEGORIES",
    "PASSTHROUGH_CONNECTORS",
]
