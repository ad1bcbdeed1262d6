"""
Pydantic models for culture listing data structures.

These models define the core data types used throughout the server:
- PerformanceRecord: Item from the KOPIS performance registry
- CultureEvent: Item from the Seoul open-data culture feed
- SearchResultBundle: Per-provider pop-up search results
- CultureListing: Feed events split by type, plus pop-ups

Upstream field names are kept as aliases so JSON responses keep the
shape the upstream APIs (and the gallery front end) use.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# Registry performance states
STATUS_UPCOMING = "공연예정"
STATUS_RUNNING = "공연중"
STATUS_FINISHED = "공연완료"
PERFORMANCE_STATUSES = (STATUS_UPCOMING, STATUS_RUNNING, STATUS_FINISHED)

# Region labels used by the registry's area field
REGIONS = [
    "서울특별시",
    "경기도",
    "인천광역시",
    "부산광역시",
    "대구광역시",
    "광주광역시",
    "대전광역시",
    "울산광역시",
    "세종특별자치시",
    "강원도",
    "충청북도",
    "충청남도",
    "전라북도",
    "전라남도",
    "경상북도",
    "경상남도",
    "제주특별자치도",
]


class DateWindow(BaseModel):
    """Inclusive registry query window, both bounds as YYYYMMDD."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str


class PerformanceRecord(BaseModel):
    """Represents a single performance or exhibition from the registry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(default="", alias="mt20id")
    title: str = Field(default="", alias="prfnm")
    start_date: str = Field(default="", alias="prfpdfrom")  # YYYYMMDD or YYYY.MM.DD
    end_date: str = Field(default="", alias="prfpdto")
    venue: str = Field(default="", alias="fcltynm")
    poster: str = ""
    area: str = ""
    genre: str = Field(default="", alias="genrenm")
    open_run: str = Field(default="", alias="openrun")  # Y / N
    status: str = Field(default="", alias="prfstate")

    @property
    def is_open_run(self) -> bool:
        return self.open_run.upper() == "Y"


class ExhibitionCard(BaseModel):
    """Gallery card built from a registry record."""

    id: str
    title: str
    place: str
    start_date: str
    end_date: str
    thumbnail: str
    type: str = "전시"
    description: str | None = None
    url: str | None = None
    fee: str | None = None
    category: str | None = None


class CultureEvent(BaseModel):
    """Represents a single event from the Seoul open-data culture feed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str = Field(default="", alias="TITLE")
    category: str = Field(default="", alias="CODENAME")
    date: str = Field(default="", alias="DATE")
    place: str = Field(default="", alias="PLACE")
    org_name: str = Field(default="", alias="ORG_NAME")
    use_target: str = Field(default="", alias="USE_TRGT")
    use_fee: str = Field(default="", alias="USE_FEE")
    player: str = Field(default="", alias="PLAYER")
    program: str = Field(default="", alias="PROGRAM")
    etc_description: str = Field(default="", alias="ETC_DESC")
    org_link: str = Field(default="", alias="ORG_LINK")
    main_image: str = Field(default="", alias="MAIN_IMG")
    registered_date: str = Field(default="", alias="RGSTDATE")
    ticket: str = Field(default="", alias="TICKET")
    start_date: str = Field(default="", alias="STRTDATE")
    end_date: str = Field(default="", alias="END_DATE")
    theme_code: str = Field(default="", alias="THEMECODE")


class SearchResultBundle(BaseModel):
    """Pop-up search results, one slot per provider vertical.

    Every slot is always present; a failed provider call leaves its slot
    empty. Items stay in the provider's own shape.
    """

    model_config = ConfigDict(populate_by_name=True)

    naver_blogs: list[dict[str, Any]] = Field(default_factory=list, alias="naverBlogs")
    naver_images: list[dict[str, Any]] = Field(default_factory=list, alias="naverImages")
    kakao_blogs: list[dict[str, Any]] = Field(default_factory=list, alias="kakaoBlogs")
    kakao_places: list[dict[str, Any]] = Field(default_factory=list, alias="kakaoPlaces")

    @property
    def total(self) -> int:
        return (
            len(self.naver_blogs)
            + len(self.naver_images)
            + len(self.kakao_blogs)
            + len(self.kakao_places)
        )


class CultureListing(BaseModel):
    """Feed events split by type, plus the pop-up search bundle."""

    model_config = ConfigDict(populate_by_name=True)

    exhibitions: list[CultureEvent] = Field(default_factory=list)
    performances: list[CultureEvent] = Field(default_factory=list)
    popup_stores: SearchResultBundle = Field(
        default_factory=SearchResultBundle, alias="popupStores"
    )


# Feed type codes accepted by the merger and the gallery tabs
CULTURE_EVENT_TYPES = {
    "PERFORMANCE": "공연",
    "EXHIBITION": "전시",
    "POPUP": "팝업",
    "FESTIVAL": "축제",
    "OTHER": "기타",
}
