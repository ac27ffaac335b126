"""Input models for the Search API tools."""

from typing import Literal, Self, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator

SortDirection: TypeAlias = Literal["asc", "desc"]


class Locale(BaseModel):
    """Locale used to localise search results."""

    language: str | None = None
    country: str | None = None


class Facet(BaseModel):
    """Facet aggregation request, optionally with selected filter values."""

    name: str = Field(description="Facet field name")
    type: Literal["value", "range", "hierarchy"] | None = Field(default=None, description="Facet type")
    values: list[str] | None = Field(default=None, description="Selected facet values for filtering")


class ExactAnswer(BaseModel):
    """Settings to get a single AI answer to the visitor query."""

    include_sources: bool | None = None
    query_types: list[Literal["question", "statement", "keyword"]] | None = None


class RelatedQuestions(BaseModel):
    """Settings to get AI-generated question-and-answer pairs."""

    include_sources: bool | None = None
    limit: int | None = Field(default=None, ge=1, le=100)
    offset: int | None = Field(default=None, ge=0)


class _SearchInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    domain_id: str = Field(min_length=1, description="Sitecore domain ID")
    rfk_id: str = Field(min_length=1, description="RFK widget ID")
    entity: str | None = Field(default=None, description="Entity type (e.g. content, product)")


class BasicSearchInput(_SearchInput):
    """Arguments of ``sitecore_search_query``."""

    keyphrase: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=24, ge=1)
    locale: Locale | None = None


class FacetedSearchInput(_SearchInput):
    """Arguments of ``sitecore_search_with_facets``."""

    keyphrase: str | None = None
    facets: list[Facet] | None = None
    sort: dict[str, SortDirection] | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=24, ge=1)


class RecommendationsInput(_SearchInput):
    """Arguments of ``sitecore_get_recommendations``."""

    recommendation_id: str | None = None
    user_id: str | None = None
    limit: int = Field(default=10, ge=1)


class AiSearchInput(_SearchInput):
    """Arguments of ``sitecore_ai_search``."""

    keyphrase: str = Field(min_length=1, max_length=100)
    exact_answer: ExactAnswer | None = None
    related_questions: RelatedQuestions | None = None

    @model_validator(mode="after")
    def _require_question_settings(self) -> Self:
        if self.exact_answer is None and self.related_questions is None:
            msg = "Provide at least one of exact_answer or related_questions."
            raise ValueError(msg)
        return self


__all__ = [
    "AiSearchInput",
    "BasicSearchInput",
    "ExactAnswer",
    "Facet",
    "FacetedSearchInput",
    "Locale",
    "RecommendationsInput",
    "RelatedQuestions",
]
