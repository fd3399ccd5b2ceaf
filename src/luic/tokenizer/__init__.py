from luic.tokenizer.classify import classify_word
from luic.tokenizer.tokenizer import Tokenizer, tokenize

__all__ = ["Tokenizer", "classify_word", "tokenize"]
