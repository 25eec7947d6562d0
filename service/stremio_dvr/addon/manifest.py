"""The fixed addon manifest and the identifiers it declares."""

from stremio_dvr.addon.models import Manifest, ManifestCatalog, ManifestExtra

ITEM_TYPE = "tv"
CATALOG_ID = "dvr-recordings"
ID_PREFIX = "dvr:"

MANIFEST = Manifest(
    id="org.stremio.dvr-local",
    version="1.0.0",
    name="DVR Recordings",
    description="Local addon for EasyProxy DVR recordings",
    resources=("catalog", "stream", "meta"),
    types=(ITEM_TYPE,),
    catalogs=(
        ManifestCatalog(
            type=ITEM_TYPE,
            id=CATALOG_ID,
            name="DVR Recordings",
            extra=(
                ManifestExtra(name="genre", options=("All Recordings",)),
                ManifestExtra(name="search"),
            ),
        ),
    ),
    idPrefixes=(ID_PREFIX,),
)


def to_addon_id(recording_id: str) -> str:
    return ID_PREFIX + recording_id


def from_addon_id(addon_id: str) -> str | None:
    """Raw recording id for a ``dvr:`` id, or None if it is not one of ours."""
    if not addon_id.startswith(ID_PREFIX):
        return None
    return addon_id[len(ID_PREFIX):] or None
