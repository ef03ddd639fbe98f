from . import answers, translations, words

__all__ = ["answers", "translations", "words"]
