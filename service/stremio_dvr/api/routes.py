"""Stremio addon routes for the DVR service."""

from pathlib import Path
from urllib.parse import parse_qsl, quote

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from stremio_dvr.addon.manifest import CATALOG_ID, ITEM_TYPE, MANIFEST, from_addon_id
from stremio_dvr.addon.models import CatalogResponse, Manifest, MetaResponse, StreamsResponse

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def parse_search(extra: str) -> str:
    """Lowercased ``search`` value of a ``name=value&...`` extra segment."""
    for name, value in parse_qsl(extra, keep_blank_values=True):
        if name == "search":
            return value.lower()
    return ""


def raw_extra(request: Request, extra: str) -> str:
    """The extra segment as the client sent it, still percent-encoded.

    Path parameters arrive decoded, so an encoded ``&`` or ``/`` inside a
    search value would otherwise split it.
    """
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return quote(extra, safe="=&")
    path = raw_path.decode("latin-1").split("?", 1)[0]
    _, _, tail = path.partition("/catalog/")
    segments = tail.split("/", 2)
    if len(segments) < 3:
        return quote(extra, safe="=&")
    return segments[2].removesuffix(".json")


def _is_dvr_catalog(item_type: str, catalog_id: str) -> bool:
    return item_type == ITEM_TYPE and catalog_id.startswith(CATALOG_ID)


def _recording_id(item_type: str, addon_id: str) -> str | None:
    if item_type != ITEM_TYPE:
        return None
    return from_addon_id(addon_id)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def home(request: Request):
    """Landing page with install links."""
    scheme = "http"
    if request.url.scheme == "https" or request.headers.get("x-forwarded-proto") == "https":
        scheme = "https"
    host = request.headers.get("host", request.url.netloc)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "manifest_url": f"{scheme}://{host}/manifest.json",
            "stremio_url": f"stremio://{host}/manifest.json",
        },
    )


@router.get("/manifest.json")
def get_manifest() -> Manifest:
    """Addon manifest."""
    return MANIFEST


@router.get("/catalog/{item_type}/{catalog_id}.json")
def get_catalog(item_type: str, catalog_id: str, request: Request) -> CatalogResponse:
    """All displayable recordings, active ones first."""
    if not _is_dvr_catalog(item_type, catalog_id):
        return CatalogResponse()
    return request.app.state.addon.catalog()


@router.get("/catalog/{item_type}/{catalog_id}/{extra:path}.json")
def search_catalog(item_type: str, catalog_id: str, extra: str, request: Request) -> CatalogResponse:
    """Catalog filtered by the ``search`` extra."""
    if not _is_dvr_catalog(item_type, catalog_id):
        return CatalogResponse()
    return request.app.state.addon.catalog(parse_search(raw_extra(request, extra)))


@router.get("/meta/{item_type}/{addon_id}.json")
def get_meta(item_type: str, addon_id: str, request: Request) -> MetaResponse:
    """Details of one recording."""
    recording_id = _recording_id(item_type, addon_id)
    if recording_id is None:
        return MetaResponse()
    return request.app.state.addon.meta(recording_id)


@router.get("/stream/{item_type}/{addon_id}.json")
def get_streams(item_type: str, addon_id: str, request: Request) -> StreamsResponse:
    """Stop, play or delete actions for one recording."""
    recording_id = _recording_id(item_type, addon_id)
    if recording_id is None:
        return StreamsResponse()
    return request.app.state.addon.streams(recording_id)


# Anything else under the resource prefixes gets the empty document.

@router.get("/catalog/{rest:path}", include_in_schema=False)
def unknown_catalog(rest: str) -> CatalogResponse:
    return CatalogResponse()


@router.get("/meta/{rest:path}", include_in_schema=False)
def unknown_meta(rest: str) -> MetaResponse:
    return MetaResponse()


@router.get("/stream/{rest:path}", include_in_schema=False)
def unknown_stream(rest: str) -> StreamsResponse:
    return StreamsResponse()
