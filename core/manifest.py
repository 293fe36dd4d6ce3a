"""Turn a submitted media manifest into ordered media records.

A manifest arrives as parallel form arrays: ``media_type[]``, ``media_desc[]``
and ``media_youtube[]``, indexed by slot. The bytes of ``file`` slots come in a
separate list of uploads that is *not* aligned with slot indexes; only file
slots consume an upload, strictly in arrival order.
"""
from typing import Iterable, Sequence

from models.media import MEDIA_IMAGE, MEDIA_VIDEO, MEDIA_YOUTUBE
from schemas.media_schema import MediaItemCreate, MediaSlot, StoredUpload

SLOT_FILE = "file"
SLOT_YOUTUBE = "youtube"


def build_slots(
    kinds: Sequence[str],
    captions: Sequence[str | None] = (),
    youtube_links: Sequence[str | None] = (),
) -> list[MediaSlot]:
    """Reshape the parallel form arrays into one slot per declared kind.

    Missing captions become ``""`` and missing links ``None``; extra captions or
    links past the last kind are ignored.
    """
    slots = []
    for i, kind in enumerate(kinds):
        caption = captions[i] if i < len(captions) else None
        link = youtube_links[i] if i < len(youtube_links) else None
        slots.append(MediaSlot(kind=kind or "", caption=caption or "", youtube_link=link))
    return slots


def classify_upload(content_type: str | None) -> str:
    return MEDIA_VIDEO if (content_type or "").startswith("video") else MEDIA_IMAGE


def media_url(url_prefix: str, filename: str) -> str:
    return url_prefix.rstrip("/") + "/" + filename


def reconcile_manifest(
    slots: Iterable[MediaSlot],
    uploads: Sequence[StoredUpload],
    url_prefix: str,
    start_order: int = 1,
) -> list[MediaItemCreate]:
    """Align manifest slots with stored uploads.

    Slots that yield no usable content (exhausted uploads, blank YouTube link,
    unknown kind) are dropped without consuming a sort position, so emitted
    records always carry ``start_order, start_order + 1, ...`` with no gaps.
    Never raises.
    """
    records: list[MediaItemCreate] = []
    file_cursor = 0
    sort_order = start_order

    for slot in slots:
        if slot.kind == SLOT_FILE:
            if file_cursor >= len(uploads):
                continue
            upload = uploads[file_cursor]
            file_cursor += 1
            records.append(
                MediaItemCreate(
                    media_type=classify_upload(upload.content_type),
                    media_path=media_url(url_prefix, upload.filename),
                    media_description=slot.caption,
                    sort_order=sort_order,
                )
            )
            sort_order += 1
        elif slot.kind == SLOT_YOUTUBE:
            link = (slot.youtube_link or "").strip()
            if not link:
                continue
            records.append(
                MediaItemCreate(
                    media_type=MEDIA_YOUTUBE,
                    media_path=link,
                    media_description=slot.caption,
                    sort_order=sort_order,
                )
            )
            sort_order += 1

    return records
