"""Rule-based syntax highlighting for XXML source text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import regex

from xxmlstudio.syntax_themes import FormatType, SyntaxTheme, TextFormat, theme_formats

BlockFormats = list[Optional[FormatType]]

NORMAL_STATE = 0
IN_COMMENT_STATE = 1

_FLAGS = regex.ASCII

_IDENT_TAIL = "[a-zA-Z0-9_]*"

_KEYWORDS = (
    "Namespace", "Class", "Structure", "Final", "Extends", "None",
    "Public", "Private", "Protected", "Static",
    "Property", "Types", "NativeType", "NativeStructure",
    "default", "Method", "Returns", "Parameters", "Parameter",
    "Entrypoint", "Instantiate", "Let", "As", "Run",
    "For", "While", "If", "Else", "Exit", "Return", "Break", "Continue",
    "Constrains", "Constraint", "Require", "Truth", "TypeOf", "On",
    "Templates", "Compiletime",
    "Do", "Set",
    "Lambda",
    "Annotation", "Annotate", "Allows", "Processor", "Retain", "AnnotationAllow",
    "Aligns", "CallbackType", "Convention",
    "Enumeration", "Value",
)


@dataclass(frozen=True)
class _Rule:
    pattern: regex.Pattern
    format_type: FormatType


def _rule(pattern: str, format_type: FormatType) -> _Rule:
    return _Rule(regex.compile(pattern, _FLAGS), format_type)


def _build_rules() -> list[_Rule]:
    ft = FormatType
    rules = [_rule(rf"\b[a-z]{_IDENT_TAIL}\b", ft.VARIABLE)]
    rules += [_rule(rf"\b{word}\b", ft.KEYWORD) for word in _KEYWORDS]
    rules += [
        _rule(r"(?<=\[\s)(Constructor|Destructor)\b", ft.KEYWORD),
        _rule(r"(?<=(Public|Private|Protected)\s)(Constructor|Destructor)\b", ft.KEYWORD),
        _rule(r"\b(true|false)\b", ft.KEYWORD),
        _rule(r"\bthis\b", ft.THIS),
        _rule(r"\bF\s*\([^)]*\)\s*\([^)]*\)", ft.TYPE),
        _rule(rf"\b[A-Z]{_IDENT_TAIL}(?:@[A-Z]{_IDENT_TAIL})+", ft.TEMPLATE_INST),
        _rule(rf"\b[A-Z]{_IDENT_TAIL}<[^>]+>", ft.TYPE),
        _rule(rf"\b[A-Z]{_IDENT_TAIL}(?=[\^&%])", ft.TYPE),
        _rule(rf"(?<=Types\s{{1,20}})[A-Z]{_IDENT_TAIL}", ft.TYPE),
        _rule(rf"(?<=Returns\s{{1,20}})[A-Z]{_IDENT_TAIL}", ft.TYPE),
        _rule(rf"(?<=Extends\s{{1,20}})[A-Z]{_IDENT_TAIL}(?!one)", ft.TYPE),
        _rule(rf"\b[A-Z]{_IDENT_TAIL}(?=::)", ft.TYPE),
        _rule(rf"(?<=::)[A-Z]{_IDENT_TAIL}|(?<=::)[a-z]{_IDENT_TAIL}", ft.METHOD_CALL),
        _rule(rf"\b[a-z]{_IDENT_TAIL}(?=\s*\()", ft.METHOD_CALL),
        _rule(rf"(?<=Run\s)[a-z]{_IDENT_TAIL}", ft.VARIABLE),
        _rule(rf"(?<=Run\s)[A-Z]{_IDENT_TAIL}", ft.TYPE),
        _rule(rf"(?<=Do\s)[a-zA-Z_]{_IDENT_TAIL}", ft.METHOD_CALL),
        _rule(rf"(?<=\.)[a-zA-Z_]{_IDENT_TAIL}", ft.IDENTIFIER),
        _rule(rf"(?<=\.)[a-zA-Z_]{_IDENT_TAIL}(?=\s*\()", ft.METHOD_CALL),
        _rule(rf"(?<=this\.)[a-zA-Z_]{_IDENT_TAIL}", ft.VARIABLE),
        _rule(rf"(?<=this\.)[a-zA-Z_]{_IDENT_TAIL}(?=\s*\()", ft.METHOD_CALL),
        _rule(rf"(?<=For\s)[a-z]{_IDENT_TAIL}", ft.VARIABLE),
        _rule(rf"(?<=Let\s)[a-z]{_IDENT_TAIL}", ft.VARIABLE),
        _rule(rf"(?<=Set\s)[a-z]{_IDENT_TAIL}", ft.VARIABLE),
        _rule(rf"(?<=As\s)[A-Z]{_IDENT_TAIL}", ft.TYPE),
        _rule(rf"(?<=Instantiate\s)[A-Z]{_IDENT_TAIL}", ft.TYPE),
        _rule(rf"(?<=(If|While)\s)[a-z]{_IDENT_TAIL}", ft.VARIABLE),
        _rule(r"[\^&%]", ft.OWNERSHIP),
        _rule(r"[\[\]]", ft.BRACKET),
        _rule(r"->", ft.OPERATOR),
        _rule(r"\.\.", ft.OPERATOR),
        _rule(r"::", ft.OPERATOR),
        _rule(r"\b[0-9]+\.?[0-9]*([eE][+-]?[0-9]+)?[fFdDlLuU]*\b", ft.NUMBER),
        _rule(r"\b0[xX][0-9a-fA-F]+[uUlL]*\b", ft.NUMBER),
        _rule(r"\b0[bB][01]+[uUlL]*\b", ft.NUMBER),
        _rule(r'"(?:[^"\\]|\\.)*"', ft.STRING),
        _rule(r"'(?:[^'\\]|\\.)'", ft.STRING),
        _rule(r"(?<=#import\s)[A-Za-z_][A-Za-z0-9_]*(?:::[A-Za-z_][A-Za-z0-9_]*)*",
              ft.IMPORT_PATH),
        _rule(r"#import\b", ft.IMPORT),
        _rule(r"//[^\n]*", ft.COMMENT),
        _rule(r"[<>]", ft.OPERATOR),
        _rule(rf"(?<=<)[a-z]{_IDENT_TAIL}(?=>)", ft.VARIABLE),
        _rule(rf"(?<=<)[A-Z]{_IDENT_TAIL}(?:::[a-zA-Z_]{_IDENT_TAIL})*(?=>)", ft.TYPE),
        _rule(rf"(?<=Method\s<)[a-zA-Z_]{_IDENT_TAIL}(?=>)", ft.METHOD_CALL),
    ]
    return rules


_RULES = _build_rules()
_COMMENT_START = regex.compile(r"/\*", _FLAGS)
_COMMENT_END = regex.compile(r"\*/", _FLAGS)


def _find(pattern: regex.Pattern, text: str, pos: int) -> Optional[regex.Match]:
    if pos > len(text):
        return None
    return pattern.search(text, pos)


class SyntaxHighlighter:
    """Assigns a format type to every character of XXML source lines.

    Rules are applied in order, each later match overriding earlier ones;
    block comments may span lines, carried by the block state.
    """

    def __init__(self, theme: SyntaxTheme | int = SyntaxTheme.VSCODE_DARK) -> None:
        self._theme = SyntaxTheme(theme)
        self._formats = theme_formats(self._theme)

    @property
    def theme(self) -> SyntaxTheme:
        return self._theme

    def set_theme(self, theme: SyntaxTheme | int) -> None:
        """Switch to ``theme``; an unknown theme value raises ValueError."""
        theme = SyntaxTheme(theme)
        if theme is not self._theme:
            self._theme = theme
            self._formats = theme_formats(theme)

    def format_for(self, format_type: FormatType) -> TextFormat:
        """The text format the current theme gives ``format_type``."""
        return self._formats[format_type]

    def highlight_block(self, text: str, previous_state: int = -1) -> tuple[BlockFormats, int]:
        """Format one line given the state left by the line before.

        Returns the per-character format types (None where unformatted) and
        the state to pass to the next line: 1 inside an open block comment,
        otherwise 0.
        """
        formats: BlockFormats = [None] * len(text)

        def apply(start: int, length: int, format_type: FormatType) -> None:
            formats[start:start + length] = [format_type] * length

        for rule in _RULES:
            for match in rule.pattern.finditer(text):
                apply(match.start(), match.end() - match.start(), rule.format_type)

        state = NORMAL_STATE
        if previous_state == IN_COMMENT_STATE:
            start = 0
        else:
            first = _COMMENT_START.search(text)
            start = first.start() if first else -1

        while start >= 0:
            end_match = _find(_COMMENT_END, text, start)
            if end_match is None:
                state = IN_COMMENT_STATE
                length = len(text) - start
            else:
                length = end_match.end() - start
            apply(start, length, FormatType.COMMENT)
            next_match = _find(_COMMENT_START, text, start + length)
            start = next_match.start() if next_match else -1

        return formats, state

    def highlight(self, text: str) -> list[BlockFormats]:
        """Format every line of ``text``, carrying comment state between lines."""
        state = -1
        blocks = []
        for line in text.split("\n"):
            formats, state = self.highlight_block(line, state)
            blocks.append(formats)
        return blocks