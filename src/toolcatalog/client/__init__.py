from toolcatalog.client.api import CatalogClient, ClientError
from toolcatalog.client.editor import EditorState
from toolcatalog.client.gallery import GalleryState
from toolcatalog.client.render import DetailView, render_detail, sanitize

__all__ = [
    "CatalogClient",
    "ClientError",
    "EditorState",
    "GalleryState",
    "DetailView",
    "render_detail",
    "sanitize",
]
