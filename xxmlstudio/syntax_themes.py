"""Colour themes for XXML syntax highlighting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SyntaxTheme(Enum):
    """Available highlighting themes."""

    DARCULA = 0
    QT_CREATOR = 1
    VSCODE_DARK = 2


class FormatType(Enum):
    """Categories of text a highlighting rule can assign."""

    KEYWORD = 0
    TYPE = 1
    ANGLE_BRACKET_ID = 2
    STRING = 3
    COMMENT = 4
    NUMBER = 5
    OPERATOR = 6
    BRACKET = 7
    OWNERSHIP = 8
    IMPORT = 9
    TEMPLATE_INST = 10
    METHOD_CALL = 11
    IDENTIFIER = 12
    VARIABLE = 13
    IMPORT_PATH = 14
    THIS = 15


@dataclass(frozen=True)
class TextFormat:
    """How a span of text is drawn: foreground colour and font style."""

    foreground: str
    italic: bool = False
    bold: bool = False


_DARCULA = {
    FormatType.KEYWORD: "#CC7832",
    FormatType.TYPE: "#6897BB",
    FormatType.ANGLE_BRACKET_ID: "#FFC66D",
    FormatType.STRING: "#6A8759",
    FormatType.COMMENT: "#808080",
    FormatType.NUMBER: "#6897BB",
    FormatType.OPERATOR: "#A9B7C6",
    FormatType.BRACKET: "#A9B7C6",
    FormatType.OWNERSHIP: "#9876AA",
    FormatType.IMPORT: "#BBB529",
    FormatType.TEMPLATE_INST: "#A9B7C6",
    FormatType.METHOD_CALL: "#FFC66D",
    FormatType.IDENTIFIER: "#D0D0D0",
    FormatType.VARIABLE: "#9CDCFE",
    FormatType.IMPORT_PATH: "#E0E0E0",
    FormatType.THIS: "#268BD2",
}

_QT_CREATOR = {
    FormatType.KEYWORD: "#FFCB6B",
    FormatType.TYPE: "#82AAFF",
    FormatType.ANGLE_BRACKET_ID: "#F78C6C",
    FormatType.STRING: "#C3E88D",
    FormatType.COMMENT: "#546E7A",
    FormatType.NUMBER: "#F78C6C",
    FormatType.OPERATOR: "#89DDFF",
    FormatType.BRACKET: "#89DDFF",
    FormatType.OWNERSHIP: "#C792EA",
    FormatType.IMPORT: "#82AAFF",
    FormatType.TEMPLATE_INST: "#FFCB6B",
    FormatType.METHOD_CALL: "#82AAFF",
    FormatType.IDENTIFIER: "#EEFFFF",
    FormatType.VARIABLE: "#89DDFF",
    FormatType.IMPORT_PATH: "#FFFFFF",
    FormatType.THIS: "#569CD6",
}

_VSCODE_DARK = {
    FormatType.KEYWORD: "#C586C0",
    FormatType.TYPE: "#4EC9B0",
    FormatType.ANGLE_BRACKET_ID: "#DCDCAA",
    FormatType.STRING: "#CE9178",
    FormatType.COMMENT: "#6A9955",
    FormatType.NUMBER: "#B5CEA8",
    FormatType.OPERATOR: "#D4D4D4",
    FormatType.BRACKET: "#FFD700",
    FormatType.OWNERSHIP: "#569CD6",
    FormatType.IMPORT: "#9CDCFE",
    FormatType.TEMPLATE_INST: "#D7BA7D",
    FormatType.METHOD_CALL: "#DCDCAA",
    FormatType.IDENTIFIER: "#E0E0E0",
    FormatType.VARIABLE: "#9CDCFE",
    FormatType.IMPORT_PATH: "#FFFFFF",
    FormatType.THIS: "#569CD6",
}

_PALETTES = {
    SyntaxTheme.DARCULA: _DARCULA,
    SyntaxTheme.QT_CREATOR: _QT_CREATOR,
    SyntaxTheme.VSCODE_DARK: _VSCODE_DARK,
}


def theme_formats(theme: SyntaxTheme | int) -> dict[FormatType, TextFormat]:
    """Text formats for every format type in ``theme``.

    ``theme`` may also be the theme's stored integer value; an unknown
    value raises ValueError. Comments are italic; nothing is bold.
    """
    palette = _PALETTES[SyntaxTheme(theme)]
    return {
        format_type: TextFormat(
            foreground=colour,
            italic=format_type is FormatType.COMMENT,
        )
        for format_type, colour in palette.items()
    }