from __future__ import annotations

from typing import Annotated, Iterable, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalizer import normalize


def _normalize_keywords(value: Iterable[str]) -> Tuple[str, ...]:
    keywords = tuple(normalize(k) for k in value)
    if not keywords:
        raise ValueError("At least one keyword is required.")
    if any(not k.strip() for k in keywords):
        raise ValueError("Keywords must be non-empty.")
    return keywords


class _PredicateBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContainsAll(_PredicateBase):
    kind: Literal["contains_all"] = "contains_all"
    keywords: Tuple[str, ...]

    @field_validator("keywords")
    @classmethod
    def check_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return _normalize_keywords(value)

    def test(self, text: str) -> bool:
        return all(k in text for k in self.keywords)

    def keyword_set(self) -> set[str]:
        return set(self.keywords)


class ContainsAny(_PredicateBase):
    kind: Literal["contains_any"] = "contains_any"
    keywords: Tuple[str, ...]

    @field_validator("keywords")
    @classmethod
    def check_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return _normalize_keywords(value)

    def test(self, text: str) -> bool:
        return any(k in text for k in self.keywords)

    def keyword_set(self) -> set[str]:
        return set(self.keywords)


class AllOf(_PredicateBase):
    kind: Literal["all_of"] = "all_of"
    predicates: Tuple["Predicate", ...] = Field(min_length=1)

    def test(self, text: str) -> bool:
        return all(p.test(text) for p in self.predicates)

    def keyword_set(self) -> set[str]:
        return set().union(*(p.keyword_set() for p in self.predicates))


class AnyOf(_PredicateBase):
    kind: Literal["any_of"] = "any_of"
    predicates: Tuple["Predicate", ...] = Field(min_length=1)

    def test(self, text: str) -> bool:
        return any(p.test(text) for p in self.predicates)

    def keyword_set(self) -> set[str]:
        return set().union(*(p.keyword_set() for p in self.predicates))


Predicate = Annotated[
    Union[ContainsAll, ContainsAny, AllOf, AnyOf],
    Field(discriminator="kind"),
]

AllOf.model_rebuild()
AnyOf.model_rebuild()


def contains_all(*keywords: str) -> ContainsAll:
    return ContainsAll(keywords=keywords)


def contains_any(*keywords: str) -> ContainsAny:
    return ContainsAny(keywords=keywords)


def all_of(*predicates) -> AllOf:
    return AllOf(predicates=predicates)


def any_of(*predicates) -> AnyOf:
    return AnyOf(predicates=predicates)
