"""Context-sensitive classification of bare words.

A bare word such as ``color`` can be a property (``ADD color red``), a
variable name (``VAR color = red``), an expansion suffix
(``ADD border color red``) or a value, depending only on the tokens
already emitted on its left. The classifier reads that prefix and never
modifies it.
"""

from __future__ import annotations

from collections.abc import Sequence

from luic import vocabulary
from luic.model.tokens import Identifier, Keyword, Property, Token, Value, Variable


def last_keyword_index(prior: Sequence[Token]) -> int | None:
    """Index of the most recent KEYWORD token in *prior*, if any."""
    for index in range(len(prior) - 1, -1, -1):
        if isinstance(prior[index], Keyword):
            return index
    return None


def _statement_property(prior: Sequence[Token]) -> Property | None:
    """The property of the current statement, if the word may still expand it.

    Expansion suffixes sit directly after the property or after another
    suffix, so the walk back only crosses Identifier tokens.
    """
    for token in reversed(prior):
        if isinstance(token, Property):
            return token
        if not isinstance(token, Identifier):
            return None
    return None


def _expands(base: str, word: str) -> bool:
    if word == "none":
        return False
    if word == "all":
        return (
            base not in vocabulary.ALL_AS_VALUE_PROPERTIES
            and bool(vocabulary.property_variants(base))
        )
    return vocabulary.is_property(f"{base}-{word}")


def classify_word(word: str, prior: Sequence[Token]) -> Token:
    """Turn a bare *word* into a KEYWORD, IDENTIFIER, VALUE, PROPERTY or VARIABLE token.

    Rules, in order:
        1. Members of the keyword set are keywords.
        2. A recognized identifier right after the statement's property
           (or after another identifier) is an expansion suffix when it
           names a real variant: ``ADD margin top 4px`` targets
           ``margin-top`` and ``ADD margin all 4px`` every ``margin-*``.
           ``none`` and words without a matching variant stay values
           (``ADD display block``).
        3. Recognized CSS value keywords are values, unless they directly
           follow a keyword (``ADD top 4px`` names the property ``top``).
        4. Right after ``VAR`` the word is the variable being declared.
        5. A recognized property is a property if the statement has none yet.
        6. Anything else is a variable name, used as a value by ``ADD``.
    """
    if vocabulary.is_keyword(word):
        return Keyword(word)

    if vocabulary.is_identifier(word):
        base = _statement_property(prior)
        if base is not None and _expands(base.name, word):
            return Identifier(word)

    previous = prior[-1] if prior else None
    if vocabulary.is_value_keyword(word) and not isinstance(previous, Keyword):
        return Value(word)

    index = last_keyword_index(prior)
    if index is not None:
        keyword = prior[index]
        if keyword.name == "VAR" and index == len(prior) - 1:
            return Variable(word)
        following = prior[index + 1] if index + 1 < len(prior) else None
        if vocabulary.is_property(word) and not isinstance(following, Property):
            return Property(word)

    return Variable(word)
