"""
Code Values
===========

Validated, typed wrappers around one code form of one domain:

- CountryCode: ISO 3166-1 alpha-2, alpha-3 and numeric codes
- CurrencyCode: ISO 4217 alphabetic and numeric codes
- LanguageCode: ISO 639-1 two-letter codes

A Code instance always denotes an assigned entity. Construction fails with
InvalidCode when the raw value has the wrong shape for the form, and with
UnknownCode when the shape is right but nothing is assigned to it.
"""

import logging
import re
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from .exceptions import InvalidCode, UnknownCode


class CodeForm(Enum):
    ALPHA2 = 'alpha2'
    ALPHA3 = 'alpha3'
    NUMERIC = 'numeric'

    def __str__(self):
        return self.value


_ALPHA2_PATTERN = re.compile(r'[A-Za-z]{2}')
_ALPHA3_PATTERN = re.compile(r'[A-Za-z]{3}')
_NUMERIC_PATTERN = re.compile(r'[0-9]{3}')

# Largest value a three-digit numeric code can take
_NUMERIC_MAX = 999


def is_alpha2(raw: Any) -> bool:
    """Shape check only: exactly two ASCII letters, in any case."""
    return isinstance(raw, str) and _ALPHA2_PATTERN.fullmatch(raw) is not None


def is_alpha3(raw: Any) -> bool:
    """Shape check only: exactly three ASCII letters, in any case."""
    return isinstance(raw, str) and _ALPHA3_PATTERN.fullmatch(raw) is not None


def is_numeric(raw: Any) -> bool:
    """Shape check only: an int in 0..999 or a string of exactly three digits."""
    if isinstance(raw, bool):
        return False
    if isinstance(raw, int):
        return 0 <= raw <= _NUMERIC_MAX
    return isinstance(raw, str) and _NUMERIC_PATTERN.fullmatch(raw) is not None


_SHAPE_CHECKS = (
    (CodeForm.ALPHA2, is_alpha2),
    (CodeForm.ALPHA3, is_alpha3),
    (CodeForm.NUMERIC, is_numeric),
)


def detect_form(raw: Any) -> Optional[CodeForm]:
    """
    Work out which code form a raw value is shaped like.

    Returns:
        The matching CodeForm, or None if the value fits no form
    """
    for form, check in _SHAPE_CHECKS:
        if check(raw):
            return form
    return None


def _coerce_form(form: Union[CodeForm, str, None]) -> Optional[CodeForm]:
    if form is None or isinstance(form, CodeForm):
        return form
    try:
        return CodeForm(str(form).lower())
    except ValueError:
        raise ValueError(f"Unknown code form: {form!r}") from None


class Code:
    """
    A validated code of one domain in one form.

    Codes compare equal when domain, form and canonical value match, so
    ``CountryCode('gb') == CountryCode('GB')`` while
    ``CountryCode('GB') != CountryCode('GBR')``.
    """

    DOMAIN = ''
    FORMS: Tuple[CodeForm, ...] = ()
    NUMERIC_WIDTH = 3

    __slots__ = ('_form', '_value')

    def __init__(self, raw: Any, form: Union[CodeForm, str, None] = None):
        from .mapping_manager import registry

        form = self._resolve_form(raw, _coerce_form(form))
        value = self._normalize(raw, form)
        if not registry.has_mapping(self.DOMAIN, form, value):
            logging.debug(f"Unassigned {self.DOMAIN} {form} code: {raw!r}")
            raise UnknownCode(self.DOMAIN, raw, form.value)
        self._form = form
        self._value = value

    @classmethod
    def parse(cls, raw: Any, form: Union[CodeForm, str, None] = None) -> 'Code':
        """
        Parse a raw code, detecting the form from its shape when none is given.

        Raises:
            InvalidCode: raw does not have the shape of the form
            UnknownCode: raw is well-formed but unassigned
        """
        if isinstance(raw, Code):
            return cls._from_code(raw, _coerce_form(form))
        return cls(raw, form)

    @classmethod
    def get(cls, raw: Any, form: Union[CodeForm, str, None] = None) -> Optional['Code']:
        """Like parse(), but returns None for unassigned codes."""
        try:
            return cls.parse(raw, form)
        except UnknownCode:
            return None

    @classmethod
    def supports(cls, form: Union[CodeForm, str]) -> bool:
        return _coerce_form(form) in cls.FORMS

    @classmethod
    def allowed_values(cls, form: Union[CodeForm, str, None] = None) -> List[Union[str, int]]:
        """
        All assigned values of one form, in catalogue order.

        Numeric values are returned as ints, alphabetic values as canonical
        uppercase strings.
        """
        from .mapping_manager import registry

        form = _coerce_form(form) or cls.FORMS[0]
        cls._check_supported(form, form.value)
        return [registry.get_code(cls.DOMAIN, form, entity)
                for entity in registry.entity_class(cls.DOMAIN)]

    @classmethod
    def for_entity(cls, entity, form: Union[CodeForm, str, None] = None) -> 'Code':
        """Build the code of an entity in the given form. Never fails for a supported form."""
        from .mapping_manager import registry

        form = _coerce_form(form) or cls.FORMS[0]
        cls._check_supported(form, entity)
        code = object.__new__(cls)
        code._form = form
        code._value = registry.get_code(cls.DOMAIN, form, entity)
        return code

    @classmethod
    def _from_code(cls, code: 'Code', form: Optional[CodeForm]) -> 'Code':
        if code.DOMAIN != cls.DOMAIN:
            raise InvalidCode(cls.DOMAIN, code, message=f"Expected a {cls.DOMAIN} code, got {code!r}")
        if form is None or form == code.form:
            return code
        return code.convert(form)

    @classmethod
    def _check_supported(cls, form: CodeForm, raw: Any):
        if form not in cls.FORMS:
            raise InvalidCode(cls.DOMAIN, raw, form.value,
                              message=f"{cls.DOMAIN.capitalize()} codes have no {form} form")

    @classmethod
    def _resolve_form(cls, raw: Any, form: Optional[CodeForm]) -> CodeForm:
        if form is None:
            form = detect_form(raw)
            if form is None:
                raise InvalidCode(cls.DOMAIN, raw)
        cls._check_supported(form, raw)
        return form

    @classmethod
    def _normalize(cls, raw: Any, form: CodeForm) -> Union[str, int]:
        if form is CodeForm.ALPHA2 and is_alpha2(raw):
            return raw.upper()
        if form is CodeForm.ALPHA3 and is_alpha3(raw):
            return raw.upper()
        if form is CodeForm.NUMERIC and is_numeric(raw):
            return int(raw)
        raise InvalidCode(cls.DOMAIN, raw, form.value)

    @property
    def form(self) -> CodeForm:
        return self._form

    @property
    def value(self) -> Union[str, int]:
        return self._value

    def entity(self):
        """The catalogue entity this code denotes."""
        from .mapping_manager import registry

        return registry.get_entity(self.DOMAIN, self._form, self._value)

    def convert(self, form: Union[CodeForm, str]) -> 'Code':
        """The code of the same entity in another form."""
        return type(self).for_entity(self.entity(), _coerce_form(form))

    def to_alpha2(self) -> 'Code':
        return self.convert(CodeForm.ALPHA2)

    def to_alpha3(self) -> 'Code':
        return self.convert(CodeForm.ALPHA3)

    def to_numeric(self) -> 'Code':
        return self.convert(CodeForm.NUMERIC)

    def to_primitive(self) -> Union[str, int]:
        """Wire value: bare int for numeric codes, canonical text otherwise."""
        return self._value

    def __str__(self):
        if self._form is CodeForm.NUMERIC:
            return f"{self._value:0{self.NUMERIC_WIDTH}d}"
        return self._value

    def __int__(self):
        if self._form is not CodeForm.NUMERIC:
            raise TypeError(f"{self!r} is not a numeric code")
        return self._value

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"

    def __eq__(self, other):
        if not isinstance(other, Code):
            return NotImplemented
        return (self.DOMAIN, self._form, self._value) == (other.DOMAIN, other._form, other._value)

    def __hash__(self):
        return hash((self.DOMAIN, self._form, self._value))

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)


class CountryCode(Code):
    """ISO 3166-1 country code (alpha-2, alpha-3 or three-digit numeric)."""

    DOMAIN = 'country'
    FORMS = (CodeForm.ALPHA2, CodeForm.ALPHA3, CodeForm.NUMERIC)

    __slots__ = ()


class CurrencyCode(Code):
    """ISO 4217 currency code (alphabetic or three-digit numeric)."""

    DOMAIN = 'currency'
    FORMS = (CodeForm.ALPHA3, CodeForm.NUMERIC)

    __slots__ = ()


class LanguageCode(Code):
    """ISO 639-1 language code."""

    DOMAIN = 'language'
    FORMS = (CodeForm.ALPHA2,)

    __slots__ = ()


CODE_CLASSES = {
    CountryCode.DOMAIN: CountryCode,
    CurrencyCode.DOMAIN: CurrencyCode,
    LanguageCode.DOMAIN: LanguageCode,
}
