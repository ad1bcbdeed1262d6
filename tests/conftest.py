"""Shared pytest fixtures for culture API tests."""

from typing import Any, Callable, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from servers.culture_api.app import create_app
from servers.culture_api.config.settings import Settings
from servers.culture_api.models import CultureEvent, PerformanceRecord
from servers.culture_api.sources.kopis import KOPIS_BASE

Handler = Callable[[httpx.Request], httpx.Response]

EMPTY_MARKER = '<?xml version="1.0" encoding="UTF-8"?><dbs/>'


def build_kopis_xml(records: list[dict[str, str]]) -> str:
    """Render registry records as a KOPIS listing body."""
    rows = []
    for record in records:
        fields = "".join(f"<{k}>{v}</{k}>" for k, v in record.items())
        rows.append(f"<db>{fields}</db>")
    return f'<?xml version="1.0" encoding="UTF-8"?><dbs>{"".join(rows)}</dbs>'


class FakeUpstream:
    """Answers mocked upstream requests by URL prefix and records them."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: list[tuple[str, Handler]] = []

    def route(self, url_prefix: str, handler: Handler) -> None:
        self.routes.append((url_prefix, handler))

    def json(self, url_prefix: str, payload: Any, status_code: int = 200) -> None:
        self.route(url_prefix, lambda request: httpx.Response(status_code, json=payload))

    def fail(self, url_prefix: str, status_code: int = 500) -> None:
        self.route(url_prefix, lambda request: httpx.Response(status_code, text="error"))

    def disconnect(self, url_prefix: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.route(url_prefix, handler)

    def kopis(self, categories: dict[str, Union[str, int]]) -> None:
        """Serve registry bodies per category code.

        Values are XML bodies, or an int status code to fail with.
        Unlisted categories answer with the empty marker.
        """

        def handler(request: httpx.Request) -> httpx.Response:
            body = categories.get(request.url.params["shcate"], EMPTY_MARKER)
            if isinstance(body, int):
                return httpx.Response(body, text="error")
            return httpx.Response(
                200, content=body.encode("utf-8"), headers={"Content-Type": "application/xml"}
            )

        self.route(KOPIS_BASE, handler)

    def requests_to(self, url_prefix: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(url_prefix)]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        for prefix, handler in self.routes:
            if url.startswith(prefix):
                return handler(request)
        return httpx.Response(404, text="no route")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def upstream() -> FakeUpstream:
    """Provide a fresh mocked upstream."""
    return FakeUpstream()


@pytest.fixture
def kopis_xml() -> Callable[[list[dict[str, str]]], str]:
    """Provide the KOPIS listing body builder."""
    return build_kopis_xml


@pytest.fixture
def settings() -> Settings:
    """Provide settings with every credential configured."""
    return Settings(
        kopis_api_key="kopis-key",
        seoul_api_key="seoul-key",
        naver_client_id="naver-id",
        naver_client_secret="naver-secret",
        kakao_rest_api_key="kakao-key",
    )


@pytest.fixture
def client(settings: Settings, upstream: FakeUpstream) -> TestClient:
    """Provide a test client wired to the mocked upstream."""
    return TestClient(create_app(settings, transport=upstream.transport))


@pytest.fixture
def seoul_record() -> dict[str, str]:
    """Provide a raw KOPIS record for a Seoul exhibition."""
    return {
        "mt20id": "PF240001",
        "prfnm": "모네와 인상주의",
        "prfpdfrom": "2024.03.01",
        "prfpdto": "2024.06.30",
        "fcltynm": "세종문화회관 미술관",
        "poster": "http://www.kopis.or.kr/upload/pfmPoster/PF_PF240001.jpg",
        "area": "서울특별시",
        "genrenm": "미술",
        "openrun": "N",
        "prfstate": "공연중",
    }


@pytest.fixture
def busan_record() -> dict[str, str]:
    """Provide a raw KOPIS record for a Busan performance."""
    return {
        "mt20id": "PF240002",
        "prfnm": "바다의 노래",
        "prfpdfrom": "2024.04.10",
        "prfpdto": "2024.04.12",
        "fcltynm": "부산문화회관",
        "poster": "http://www.kopis.or.kr/upload/pfmPoster/PF_PF240002.jpg",
        "area": "부산광역시",
        "genrenm": "서양음악(클래식)",
        "openrun": "N",
        "prfstate": "공연예정",
    }


@pytest.fixture
def sample_records(seoul_record: dict, busan_record: dict) -> list[PerformanceRecord]:
    """Provide parsed registry records from two regions."""
    return [
        PerformanceRecord.model_validate(seoul_record),
        PerformanceRecord.model_validate(busan_record),
        PerformanceRecord(
            id="PF240003",
            title="서울 재즈 나이트",
            area="서울특별시",
            status="공연예정",
        ),
    ]


@pytest.fixture
def seoul_feed_rows() -> list[dict[str, str]]:
    """Provide raw Seoul culture feed rows."""
    return [
        {
            "TITLE": "서울 사진전",
            "CODENAME": "전시/미술",
            "DATE": "2024-05-01~2024-05-31",
            "PLACE": "서울시립미술관",
            "ORG_NAME": "서울특별시",
            "USE_FEE": "무료",
            "MAIN_IMG": "https://culture.seoul.go.kr/img/1.jpg",
            "ORG_LINK": "https://sema.seoul.go.kr",
        },
        {
            "TITLE": "한여름 밤의 꿈",
            "CODENAME": "공연/연극",
            "DATE": "2024-06-01~2024-06-03",
            "PLACE": "세종문화회관",
            "USE_FEE": "30,000원",
        },
        {
            "TITLE": "국악 한마당",
            "CODENAME": "국악",
            "DATE": "2024-06-10",
            "PLACE": "국립국악원",
        },
    ]


@pytest.fixture
def seoul_events(seoul_feed_rows: list[dict]) -> list[CultureEvent]:
    """Provide parsed Seoul culture feed events."""
    return [CultureEvent.model_validate(row) for row in seoul_feed_rows]


@pytest.fixture
def naver_blog_items() -> list[dict[str, str]]:
    """Provide Naver blog search items."""
    return [
        {
            "title": "<b>세모편집숍</b> 성수 팝업 후기",
            "link": "https://blog.naver.com/a/1",
            "description": "성수동 <b>팝업스토어</b> 다녀왔어요",
            "bloggername": "a",
            "postdate": "20240501",
        },
        {
            "title": "주말 나들이",
            "link": "https://blog.naver.com/b/2",
            "description": "여러 곳 방문",
            "bloggername": "b",
            "postdate": "20240502",
        },
    ]


@pytest.fixture
def naver_image_items() -> list[dict[str, str]]:
    """Provide Naver image search items."""
    return [
        {
            "title": "<b>세모편집숍</b> 성수 팝업 후기 사진",
            "link": "https://img.example.com/1.jpg",
            "thumbnail": "https://img.example.com/1_t.jpg",
            "sizeheight": "800",
            "sizewidth": "600",
        },
        {
            "title": "전혀 다른 사진",
            "link": "https://img.example.com/2.jpg",
            "thumbnail": "https://img.example.com/2_t.jpg",
            "sizeheight": "800",
            "sizewidth": "600",
        },
    ]


@pytest.fixture
def kakao_blog_documents() -> list[dict[str, str]]:
    """Provide Kakao blog search documents."""
    return [
        {
            "title": "세모편집숍 팝업 방문기",
            "contents": "<b>세모편집숍</b> 팝업스토어",
            "url": "https://brunch.co.kr/@c/3",
            "blogname": "c",
            "datetime": "2024-05-03T10:00:00.000+09:00",
        }
    ]


@pytest.fixture
def kakao_place_documents() -> list[dict[str, str]]:
    """Provide Kakao place search documents."""
    return [
        {
            "id": "12345",
            "place_name": "세모편집숍 성수",
            "category_name": "문화,예술 > 문화시설",
            "address_name": "서울 성동구 성수동2가 1",
            "road_address_name": "서울 성동구 연무장길 1",
            "phone": "02-000-0000",
            "place_url": "http://place.map.kakao.com/12345",
            "x": "127.05",
            "y": "37.54",
        }
    ]
