"""Surface-syntax predicates used by the rule based language detector.

Every predicate takes an already trimmed sample and answers a single yes/no
question about it. Predicates are pure; they are combined into the ordered
``DEFAULT_RULES`` table that the detector walks top to bottom.
"""

import re

from .models import DetectionRule, LanguageTag

# C++
_CPP_INCLUDE = re.compile(r"#include\s*<.*?>")
_CPP_MAIN = re.compile(r"\bint\s+main\s*\(")
_CPP_STREAMS = re.compile(r"\b(?:cout|cin)\b")
_CPP_RETURN_ZERO = re.compile(r"\breturn\s+0\s*;")

# HTML
_HTML_DOCTYPE = "<!doctype html"
_HTML_TAG = re.compile(r"</?(?:html|head|body|div|span|a|p|h[1-6])\b")

# CSS
# Each pattern starts at most once per run of candidate characters.
_CSS_DECLARATION = re.compile(r"(?<![a-z-])[a-z-]+\s*:\s*[^;{}:]+;")
_CSS_BLOCK = re.compile(r"\{[^{}]*\}")
_SCRIPT_SYNTAX = re.compile(
    r"\bfunction\s*[\w$]*\s*\("
    r"|\binterface\s+[A-Za-z_$]"
    r"|\benum\s+\w+\s*\{"
    r"|\btype\s+\w+\s*="
    r"|\b(?:const|let|var)\s+[A-Za-z_$]"
    r"|=>"
    r"|\breturn(?:\s*;|\s+[^\s{])"
)

# TypeScript
_TS_KEYWORD = re.compile(r"\b(?:interface|type|readonly)\b")
_TS_ANNOTATION = re.compile(r":\s*(?:string|number|boolean|any)\b")
_TS_TYPED_CONST = re.compile(r"\bconst\s+\w+\s*:\s*\w+")

# JavaScript
_JS_FUNCTION = re.compile(r"\bfunction\s*\(")
_JS_DECLARATION = re.compile(r"\b(?:var|let|const)\s+\w+")
_JS_RETURN = re.compile(r"\breturn\b")
_JS_IF = re.compile(r"\bif\s*\(")


def is_cpp(sample: str) -> bool:
    """Includes, iostream usage or a classic ``int main`` entry point."""
    return bool(
        _CPP_INCLUDE.search(sample)
        or "iostream" in sample
        or "using namespace std" in sample
        or _CPP_MAIN.search(sample)
        or _CPP_STREAMS.search(sample)
        or _CPP_RETURN_ZERO.search(sample)
    )


def is_html(sample: str) -> bool:
    """A doctype prefix (any case) or a common structural/text tag."""
    return sample.lower().startswith(_HTML_DOCTYPE) or bool(_HTML_TAG.search(sample))


def has_css_declaration(sample: str) -> bool:
    return bool(_CSS_DECLARATION.search(sample))


def has_brace_block(sample: str) -> bool:
    return bool(_CSS_BLOCK.search(sample))


def mentions_script_syntax(sample: str) -> bool:
    """
    Check for JavaScript/TypeScript declarations that CSS never contains.

    This is what keeps object literals and interface bodies, which also
    have ``name: value;`` pairs inside braces, out of the CSS bucket.
    """
    return bool(_SCRIPT_SYNTAX.search(sample))


def is_css(sample: str) -> bool:
    return (
        has_brace_block(sample)
        and has_css_declaration(sample)
        and not mentions_script_syntax(sample)
    )


def is_typescript(sample: str) -> bool:
    return bool(
        _TS_KEYWORD.search(sample)
        or _TS_ANNOTATION.search(sample)
        or _TS_TYPED_CONST.search(sample)
    )


def is_javascript(sample: str) -> bool:
    return bool(
        _JS_FUNCTION.search(sample)
        or "=>" in sample
        or _JS_DECLARATION.search(sample)
        or "console." in sample
        or _JS_RETURN.search(sample)
        or _JS_IF.search(sample)
    )


# Order matters: the most distinctive markers first, TypeScript before its
# JavaScript superset-of-signals.
DEFAULT_RULES = (
    DetectionRule(LanguageTag.CPP, "is_cpp", is_cpp),
    DetectionRule(LanguageTag.HTML, "is_html", is_html),
    DetectionRule(LanguageTag.CSS, "is_css", is_css),
    DetectionRule(LanguageTag.TYPESCRIPT, "is_typescript", is_typescript),
    DetectionRule(LanguageTag.JAVASCRIPT, "is_javascript", is_javascript),
)
