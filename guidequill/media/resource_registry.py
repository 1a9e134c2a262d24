"""Read-only registry of screenshot resources referenced by the guide."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from ..exceptions import MediaError
from ..models.guide import Screenshot

logger = logging.getLogger(__name__)

ImageData = Union[bytes, bytearray, str]


@dataclass(frozen=True, slots=True)
class Resource:
    """Caption plus image data as supplied; decoded when drawn."""
    caption: str
    image_data: ImageData


def decode_image_data(data: ImageData) -> bytes:
    """Decode a data URI or bare base64 string into bytes.

    Raw bytes are returned unchanged.

    Raises:
        MediaError: if a string payload is not valid base64
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if not isinstance(data, str):
        raise MediaError("Unsupported image data type", type(data).__name__)

    payload = data.strip()
    if payload.startswith("data:"):
        header, sep, payload = payload.partition(",")
        if not sep:
            raise MediaError("Malformed data URI", header[:40])
        if not header.endswith(";base64"):
            raise MediaError("Only base64 data URIs are supported", header[:40])
    payload = "".join(payload.split())
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MediaError("Invalid base64 image data", str(exc)) from exc


class ResourceRegistry:
    """Mapping from resource id to caption and image data.

    Populated once before rendering; lookups never mutate it and an unknown
    id is a normal outcome (``None``), not an error.
    """

    def __init__(self, resources: Optional[Mapping[str, Resource]] = None) -> None:
        self._resources = MappingProxyType(dict(resources or {}))

    @classmethod
    def from_screenshots(cls, screenshots: Iterable[Union[Screenshot, Mapping[str, ImageData]]]) -> "ResourceRegistry":
        """Build a registry from crawl-stage entries.

        Entries are ``Screenshot`` objects or mappings with ``id``,
        ``description`` and ``imageData`` (or ``data``) keys. The first entry
        for an id wins.
        """
        resources = {}
        for entry in screenshots:
            if isinstance(entry, Screenshot):
                resource_id, caption, data = entry.id, entry.description, entry.data
            else:
                resource_id = entry["id"]
                caption = entry.get("description", "")
                data = entry.get("imageData", entry.get("data", b""))

            if resource_id in resources:
                logger.warning(f"Duplicate resource id '{resource_id}' ignored")
                continue
            resources[resource_id] = Resource(caption=str(caption), image_data=data)

        logger.debug(f"Resource registry built with {len(resources)} entries")
        return cls(resources)

    def lookup(self, resource_id: str) -> Optional[Resource]:
        return self._resources.get(resource_id)

    @property
    def resources(self) -> Mapping[str, Resource]:
        return self._resources

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[str]:
        return iter(self._resources)
