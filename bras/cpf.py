import re

__all__ = ['CPF']

from bras import functions
from bras.alias import DIGITS
from bras.bases import AbstractDocument


class CPF(AbstractDocument):
    """Cadastro de Pessoas Físicas, the brazilian individual taxpayer number.
    
    >>> CPF('016.783.460-63') == CPF(1678346063)
    True
    >>> CPF('01678346063').value
    1678346063
    """
    SIZE = 11
    CHECK_SIZE = 2
    NON_GROUP_PATTERN = re.compile(r'[0-9]{11}')
    GROUP_PATTERN = re.compile(r'(?P<first>[0-9]{3})\.(?P<second>[0-9]{3})\.(?P<third>[0-9]{3})-(?P<check>[0-9]{2})')
    SEPARATORS = '.-'
    
    @classmethod
    def check_digits(cls, base: DIGITS) -> DIGITS:
        first = functions.mod11_digit(base)
        return first, functions.mod11_digit((*base, first))
