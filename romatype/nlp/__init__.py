"""Language processing helpers used to prepare typing targets."""

from .japanese import JapanesePhonetics

__all__ = ['JapanesePhonetics']
