"""
Entity Catalogues
=================

Closed enumerations of countries, currencies and languages. Each domain has
a member-less base here carrying its accessors; the members themselves live
in the data package, one per entity, in definition order.
"""

from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from .codes import Code, CodeForm, CountryCode, CurrencyCode, LanguageCode
from .exceptions import InvalidCode


class CatalogueEntry(Enum):
    """
    Shared behaviour of every catalogue member.

    Members are singletons: equality and hashing follow identity, so two
    values are equal exactly when they denote the same entity.
    """

    @classmethod
    def code_class(cls):
        raise NotImplementedError

    @classmethod
    def domain(cls) -> str:
        return cls.code_class().DOMAIN

    @classmethod
    def all(cls) -> List['CatalogueEntry']:
        """Every member of the catalogue, in definition order."""
        return list(cls)

    @classmethod
    def from_code(cls, raw: Any, form: Union[CodeForm, str, None] = None) -> 'CatalogueEntry':
        """
        Resolve a raw code (or a Code) to its entity.

        Raises:
            InvalidCode: raw does not have the shape of the form
            UnknownCode: raw is well-formed but unassigned
        """
        return cls.code_class().parse(raw, form).entity()

    @classmethod
    def get(cls, raw: Any, form: Union[CodeForm, str, None] = None) -> Optional['CatalogueEntry']:
        """Like from_code(), but returns None for unassigned codes."""
        code = cls.code_class().get(raw, form)
        return code.entity() if code is not None else None

    @classmethod
    def find_by_name(cls, name: str) -> Optional['CatalogueEntry']:
        """Exact match on the canonical name."""
        for entity in cls:
            if entity.full_name == name:
                return entity
        return None

    def code(self, form: Union[CodeForm, str, None] = None) -> Code:
        """This entity's code in the given form (the domain's primary form by default)."""
        return self.code_class().for_entity(self, form)

    def raw_code(self, form: CodeForm) -> Union[str, int]:
        if form not in self.code_class().FORMS:
            raise InvalidCode(self.domain(), self.name, form.value,
                              message=f"{self.domain().capitalize()} codes have no {form} form")
        return getattr(self, form.value)

    def __str__(self):
        return self.full_name

    def __repr__(self):
        return f"<{type(self).__name__}.{self.name}: {self.full_name}>"


class CountryEntry(CatalogueEntry):
    """A country or territory with ISO 3166-1 codes."""

    def __init__(self, alpha3: str, numeric: int, full_name: str):
        self.alpha3 = alpha3
        self.numeric = numeric
        self.full_name = full_name

    @classmethod
    def code_class(cls):
        return CountryCode

    @property
    def alpha2(self) -> str:
        return self.name

    def currencies(self) -> Tuple:
        """Currencies used in this country, in catalogue order."""
        from .relationships import relationship_index

        return relationship_index.currencies_of(self)

    def languages(self) -> Tuple:
        """Languages used in this country, in catalogue order."""
        from .relationships import relationship_index

        return relationship_index.languages_of(self)


class CurrencyEntry(CatalogueEntry):
    """An ISO 4217 currency, fund or other unit of account."""

    def __init__(self, numeric: int, full_name: str, digits: int):
        self.numeric = numeric
        self.full_name = full_name
        self.digits = digits

    @classmethod
    def code_class(cls):
        return CurrencyCode

    @property
    def alpha3(self) -> str:
        return self.name

    def countries(self) -> Tuple:
        """Countries using this currency, in catalogue order."""
        from .relationships import relationship_index

        return relationship_index.countries_using(self)


class LanguageEntry(CatalogueEntry):
    """An ISO 639-1 language."""

    def __init__(self, full_name: str):
        self.full_name = full_name

    @classmethod
    def code_class(cls):
        return LanguageCode

    @property
    def alpha2(self) -> str:
        return self.name

    def countries(self) -> Tuple:
        """Countries where this language is used, in catalogue order."""
        from .relationships import relationship_index

        return relationship_index.countries_using(self)
