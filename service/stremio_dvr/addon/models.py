"""Stremio protocol documents served by the addon."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class ManifestExtra(BaseModel):
    """Extra property accepted by a catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    isRequired: bool = False
    options: tuple[str, ...] | None = None

    @model_serializer(mode="wrap")
    def _omit_unset_options(self, handler):
        data = handler(self)
        if data.get("options") is None:
            data.pop("options", None)
        return data


class ManifestCatalog(BaseModel):
    """Catalog definition in manifest."""

    model_config = ConfigDict(frozen=True)

    type: str
    id: str
    name: str
    extra: tuple[ManifestExtra, ...] = ()


class Manifest(BaseModel):
    """Stremio addon manifest."""

    model_config = ConfigDict(frozen=True)

    id: str
    version: str
    name: str
    description: str
    resources: tuple[str, ...]
    types: tuple[str, ...]
    catalogs: tuple[ManifestCatalog, ...]
    idPrefixes: tuple[str, ...]


class MetaItem(BaseModel):
    """Rendered view of one recording, used by catalog and meta responses."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["tv"] = "tv"
    name: str
    description: str = ""
    releaseInfo: str = ""
    runtime: str = ""

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        return {key: value for key, value in handler(self).items() if value != ""}


class Stream(BaseModel):
    """A labelled action URL offered for a recording."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str


class CatalogResponse(BaseModel):
    metas: list[MetaItem] = Field(default_factory=list)


class MetaResponse(BaseModel):
    meta: MetaItem | None = None


class StreamsResponse(BaseModel):
    streams: list[Stream] = Field(default_factory=list)
