from __future__ import annotations

__all__ = ['AbstractDocument']

from abc import abstractmethod
from collections import UserString
from re import Pattern
from typing import Any, ClassVar, Type, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from bras import functions
from bras.alias import DIGITS, DIGIT_STRING
from bras.exception import InvalidChecksumException, InvalidFormatException, InvalidLengthException, \
    RepeatedDigitsException
from bras.settings import settings


class AbstractDocument(UserString):
    """Base class of documents made of a fixed number of digits ending in check digits.

    The digits are validated once, in the constructor, and the instance can not
    be changed afterwards.

    :param value: digits as text, bare or punctuated, a non negative integer or another document
    :type value: str | int | AbstractDocument
    """
    SIZE: ClassVar[int] = None
    CHECK_SIZE: ClassVar[int] = None
    NON_GROUP_PATTERN: ClassVar[Pattern] = None
    GROUP_PATTERN: ClassVar[Pattern] = None
    SEPARATORS: ClassVar[str] = ''

    def __init__(self, value: Union[str, int, AbstractDocument]) -> None:
        super().__init__(self.parse(value))
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise AttributeError(f'{type(self).__name__} is immutable')
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    # text operations give plain str, the result is not a document
    def __getitem__(self, index) -> str:
        return self.data[index]

    def __add__(self, other) -> str:
        return self.data + str(other)

    def __radd__(self, other) -> str:
        return str(other) + self.data

    def __mul__(self, n: int) -> str:
        return self.data * n

    __rmul__ = __mul__

    def replace(self, old, new, maxsplit: int = -1) -> str:
        return self.data.replace(str(old), str(new), maxsplit)

    def zfill(self, width: int) -> str:
        return self.data.zfill(width)

    def ljust(self, width: int, *args) -> str:
        return self.data.ljust(width, *args)

    def rjust(self, width: int, *args) -> str:
        return self.data.rjust(width, *args)

    def center(self, width: int, *args) -> str:
        return self.data.center(width, *args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.data}')"

    @classmethod
    @abstractmethod
    def check_digits(cls, base: DIGITS) -> DIGITS:...

    @classmethod
    def from_int(cls, value: int) -> Self:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'{cls.__name__}.from_int expects int, got {type(value).__name__}')
        return cls(value)

    @classmethod
    def from_str(cls, value: str) -> Self:
        if not isinstance(value, str):
            raise TypeError(f'{cls.__name__}.from_str expects str, got {type(value).__name__}')
        return cls(value)

    @classmethod
    def parse(cls, value: Union[str, int, AbstractDocument]) -> DIGIT_STRING:
        if isinstance(value, cls):
            return value.data
        elif isinstance(value, str):
            return cls.parse_text(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            return cls.parse_int(value)
        raise InvalidFormatException(f'{cls.__name__} can not be parsed from {type(value).__name__}', value)

    @classmethod
    def parse_int(cls, value: int) -> DIGIT_STRING:
        if not 0 <= value < 10 ** cls.SIZE:
            raise InvalidLengthException(f'{cls.__name__} number must have at most {cls.SIZE} digits', value)
        return cls.verify(functions.zero_pad(value, cls.SIZE))

    @classmethod
    def parse_text(cls, value: str) -> DIGIT_STRING:
        digits = functions.remove_separators(value, cls.SEPARATORS)
        if len(functions.find_digits(digits)) != len(digits):
            raise InvalidFormatException(f'{cls.__name__} must contain only digits and "{cls.SEPARATORS}"', value)
        if len(digits) != cls.SIZE:
            raise InvalidLengthException(f'{cls.__name__} must have {cls.SIZE} digits, got {len(digits)}', value)
        if not any([cls.NON_GROUP_PATTERN.fullmatch(value), cls.GROUP_PATTERN.fullmatch(value)]):
            raise InvalidFormatException(f'{cls.__name__} separators are out of place', value)
        return cls.verify(digits)

    @classmethod
    def verify(cls, digits: DIGIT_STRING) -> DIGIT_STRING:
        if settings.reject_repeated_digits and functions.all_equal(digits):
            raise RepeatedDigitsException(f'{cls.__name__} can not repeat a single digit', digits)
        base, check = digits[:-cls.CHECK_SIZE], digits[-cls.CHECK_SIZE:]
        expected = ''.join(str(i) for i in cls.check_digits(functions.to_digits(base)))
        if check != expected:
            raise InvalidChecksumException(f'{cls.__name__} check digits should be {expected}, got {check}', digits)
        return digits

    @property
    def value(self) -> int:
        return int(self.data)

    @property
    def digits(self) -> DIGITS:
        return functions.to_digits(self.data)

    @property
    def base(self) -> DIGIT_STRING:
        return self.data[:-self.CHECK_SIZE]

    @property
    def check(self) -> DIGIT_STRING:
        return self.data[-self.CHECK_SIZE:]

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Type[Any], handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda obj: str(obj),
                                                                           return_schema=core_schema.str_schema()),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.union_schema([
                core_schema.str_schema(min_length=cls.SIZE),
                core_schema.int_schema(ge=0, lt=10 ** cls.SIZE),
        ]))

    @classmethod
    def validate(cls, obj: Union[str, int, AbstractDocument]) -> Self:
        if isinstance(obj, cls):
            return obj
        return cls(obj)
