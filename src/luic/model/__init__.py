from luic.model.records import CommentRecord, Declaration, LayerRecord, Record
from luic.model.tokens import (
    Comment,
    Edge,
    Identifier,
    Keyword,
    LayerMarker,
    MediaValue,
    MediaVariableRef,
    Property,
    PseudoClass,
    Symbol,
    Token,
    TokenKind,
    Value,
    ValueType,
    Variable,
    VariableRef,
    Visibility,
)

__all__ = [
    "Comment",
    "CommentRecord",
    "Declaration",
    "Edge",
    "Identifier",
    "Keyword",
    "LayerMarker",
    "LayerRecord",
    "MediaValue",
    "MediaVariableRef",
    "Property",
    "PseudoClass",
    "Record",
    "Symbol",
    "Token",
    "TokenKind",
    "Value",
    "ValueType",
    "Variable",
    "VariableRef",
    "Visibility",
]
