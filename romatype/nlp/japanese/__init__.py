"""Japanese language processing module."""

from .phonetics import JapanesePhonetics

__all__ = [
    'JapanesePhonetics',
]
