"""Image reference resolution"""

from typing import Optional, Protocol
from urllib.parse import quote


class AssetResolver(Protocol):
    """Turns an opaque image reference into something displayable"""

    def resolve(self, ref: str) -> Optional[str]:
        ...


class UrlAssetResolver:
    """
    Resolves image references against a static asset base URL.

    References that already are absolute URLs are returned unchanged.
    """

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url.rstrip("/") if base_url else None

    def resolve(self, ref: str) -> Optional[str]:
        if not ref:
            return None
        if ref.startswith(("http://", "https://")):
            return ref
        if self.base_url is None:
            return None
        return f"{self.base_url}/{quote(ref.lstrip('/'))}"
