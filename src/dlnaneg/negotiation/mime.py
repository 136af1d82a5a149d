"""Per-renderer MIME type overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dlnaneg.profiles.models import DeviceProfile


def remap_mime_type(
    profile: DeviceProfile,
    device_friendly_name: str,
    mime: str,
) -> str:
    """Return the MIME type a renderer expects in place of ``mime``.

    Unknown devices and unmapped types are returned unchanged.
    """
    table = profile.mime_remap.get(device_friendly_name)
    if table is None:
        return mime
    return table.get(mime, mime)
