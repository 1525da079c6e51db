"""Data models for AniList GraphQL responses.

These are transport DTOs mirroring the remote schema. They are deliberately
permissive:
- Every remote field except record ids is optional, so a missing nested
  collection shows up as ``None`` rather than a validation failure.
- Field names are snake_case in Python and camelCase on the wire; the alias
  generator maps between the two and either form is accepted on input.
- Unknown fields are kept (``extra="allow"``) so widening a query's selection
  does not require touching the models.
- Instances are frozen; a response is never mutated after it is parsed.

The ``*Query`` classes at the bottom are the per-operation response roots, one
for each entry in ``anilist_sdk.queries.catalog.CATALOG``.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AniListModel(BaseModel):
    """Base model for every AniList record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


class PageInfo(AniListModel):
    """Pagination metadata attached to a connection or a Page."""

    total: int | None = None
    per_page: int | None = None
    current_page: int | None = None
    last_page: int | None = None
    has_next_page: bool | None = None


class FuzzyDate(AniListModel):
    """A date where any component may be unknown."""

    year: int | None = None
    month: int | None = None
    day: int | None = None


class MediaTitle(AniListModel):
    romaji: str | None = None
    english: str | None = None
    native: str | None = None
    user_preferred: str | None = None

    def best(self) -> str | None:
        """Return the English title, falling back to romaji, then native."""
        return self.english or self.romaji or self.native


class CoverImage(AniListModel):
    extra_large: str | None = None
    large: str | None = None
    medium: str | None = None
    color: str | None = None


class Name(AniListModel):
    """Name block shared by characters and staff."""

    first: str | None = None
    last: str | None = None
    full: str | None = None
    native: str | None = None
    user_preferred: str | None = None


class Image(AniListModel):
    large: str | None = None
    medium: str | None = None


class Character(AniListModel):
    id: int
    name: Name | None = None
    image: Image | None = None
    description: str | None = None
    gender: str | None = None
    age: str | None = None
    date_of_birth: FuzzyDate | None = None
    favourites: int | None = None
    site_url: str | None = None


class Staff(AniListModel):
    id: int
    name: Name | None = None
    image: Image | None = None
    language_v2: str | None = None
    primary_occupations: list[str | None] | None = None
    gender: str | None = None
    favourites: int | None = None
    site_url: str | None = None


class Studio(AniListModel):
    id: int
    name: str | None = None
    is_animation_studio: bool | None = None
    favourites: int | None = None
    site_url: str | None = None


class CharacterEdge(AniListModel):
    """A character attached to a media entry, with the character's role."""

    role: str | None = None
    node: Character | None = None


class StaffEdge(AniListModel):
    role: str | None = None
    node: Staff | None = None


class StudioEdge(AniListModel):
    is_main: bool | None = None
    node: Studio | None = None


class MediaEdge(AniListModel):
    """A related media entry (sequel, prequel, adaptation, ...)."""

    relation_type: str | None = None
    node: "Media | None" = None


class Recommendation(AniListModel):
    id: int | None = None
    rating: int | None = None
    media_recommendation: "Media | None" = None


class CharacterConnection(AniListModel):
    page_info: PageInfo | None = None
    edges: list[CharacterEdge | None] | None = None


class StaffConnection(AniListModel):
    page_info: PageInfo | None = None
    edges: list[StaffEdge | None] | None = None


class StudioConnection(AniListModel):
    edges: list[StudioEdge | None] | None = None


class MediaConnection(AniListModel):
    edges: list[MediaEdge | None] | None = None


class RecommendationConnection(AniListModel):
    page_info: PageInfo | None = None
    nodes: list[Recommendation | None] | None = None


class Media(AniListModel):
    """An AniList media entry. Only the anime variant is requested."""

    id: int
    id_mal: int | None = None
    title: MediaTitle | None = None
    type: str | None = None
    format: str | None = None
    status: str | None = None
    description: str | None = None
    episodes: int | None = None
    duration: int | None = None
    season: str | None = None
    season_year: int | None = None
    start_date: FuzzyDate | None = None
    end_date: FuzzyDate | None = None
    genres: list[str | None] | None = None
    average_score: int | None = None
    mean_score: int | None = None
    popularity: int | None = None
    favourites: int | None = None
    trending: int | None = None
    is_adult: bool | None = None
    cover_image: CoverImage | None = None
    banner_image: str | None = None
    site_url: str | None = None

    characters: CharacterConnection | None = None
    staff: StaffConnection | None = None
    studios: StudioConnection | None = None
    relations: MediaConnection | None = None
    recommendations: RecommendationConnection | None = None


MediaEdge.model_rebuild()
Recommendation.model_rebuild()


class Page(AniListModel):
    page_info: PageInfo | None = None
    media: list[Media | None] | None = None


# ---------------------------------------------------------------------------
# Per-operation response roots
# ---------------------------------------------------------------------------


class MediaQuery(AniListModel):
    """Response root for operations selecting a single ``Media``."""

    media: Media | None = Field(default=None, alias="Media")


class PageQuery(AniListModel):
    """Response root for operations selecting a ``Page`` of media."""

    page: Page | None = Field(default=None, alias="Page")

    @property
    def items(self) -> list[Media]:
        """Media entries of the page, skipping nulls."""
        if self.page is None or not self.page.media:
            return []
        return [media for media in self.page.media if media is not None]


class GetAnimeByIdQuery(MediaQuery):
    pass


class GetAnimeCharactersQuery(MediaQuery):
    pass


class GetAnimeByTitleQuery(MediaQuery):
    pass


class GetAnimeRecommendationsQuery(MediaQuery):
    pass


class GetAnimeStaffQuery(MediaQuery):
    pass


class GetAnimeRelationsQuery(MediaQuery):
    pass


class SearchAnimeQuery(PageQuery):
    pass


class GetAnimeTrendingQuery(PageQuery):
    pass


class GetAnimePopularQuery(PageQuery):
    pass


class GetAnimeListByGenreQuery(PageQuery):
    pass

