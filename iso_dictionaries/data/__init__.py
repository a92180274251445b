from .countries import Country
from .currencies import Currency
from .languages import Language
from .usage import COUNTRY_USAGE

__all__ = [
    'Country',
    'Currency',
    'Language',
    'COUNTRY_USAGE',
]
