from core.manifest import build_slots, classify_upload, reconcile_manifest
from schemas.media_schema import MediaSlot, StoredUpload

PREFIX = "/uploads"


def _upload(name, content_type):
    return StoredUpload(filename=name, content_type=content_type)


def _summary(records):
    return [(r.media_type, r.media_path, r.media_description, r.sort_order) for r in records]


def test_mixed_manifest_aligns_files_by_arrival_order():
    slots = build_slots(["file", "youtube", "file"], ["a", "b", "c"], [None, "https://yt/x", None])
    uploads = [_upload("f1.jpg", "image/jpeg"), _upload("f2.mp4", "video/mp4")]

    records = reconcile_manifest(slots, uploads, PREFIX)

    assert _summary(records) == [
        ("image", "/uploads/f1.jpg", "a", 1),
        ("youtube", "https://yt/x", "b", 2),
        ("video", "/uploads/f2.mp4", "c", 3),
    ]


def test_fully_satisfied_manifest_numbers_every_slot():
    kinds = ["youtube", "file", "file", "youtube", "file"]
    links = ["https://yt/1", "", "", "https://yt/2", ""]
    uploads = [_upload(f"{i}.png", "image/png") for i in range(3)]

    records = reconcile_manifest(build_slots(kinds, [], links), uploads, PREFIX)

    assert len(records) == len(kinds)
    assert [r.sort_order for r in records] == [1, 2, 3, 4, 5]
    assert [r.media_type for r in records] == ["youtube", "image", "image", "youtube", "image"]
    assert [r.media_path for r in records if r.media_type == "image"] == [
        "/uploads/0.png",
        "/uploads/1.png",
        "/uploads/2.png",
    ]


def test_exhausted_uploads_skip_file_slots_without_gaps():
    slots = build_slots(
        ["file", "file", "youtube", "file", "youtube"],
        ["one", "two", "three", "four", "five"],
        [None, None, "https://yt/3", None, "https://yt/5"],
    )
    uploads = [_upload("only.jpg", "image/jpeg")]

    records = reconcile_manifest(slots, uploads, PREFIX)

    assert _summary(records) == [
        ("image", "/uploads/only.jpg", "one", 1),
        ("youtube", "https://yt/3", "three", 2),
        ("youtube", "https://yt/5", "five", 3),
    ]


def test_blank_youtube_link_is_treated_as_absent():
    slots = build_slots(["youtube", "youtube", "youtube"], ["x", "y", "z"], ["   ", None, "  https://yt/ok \n"])

    records = reconcile_manifest(slots, [], PREFIX)

    assert _summary(records) == [("youtube", "https://yt/ok", "z", 1)]


def test_skipped_youtube_slot_does_not_consume_an_upload():
    slots = build_slots(["youtube", "file"], ["empty link", "picture"], [" ", None])
    records = reconcile_manifest(slots, [_upload("p.webp", "image/webp")], PREFIX)

    assert _summary(records) == [("image", "/uploads/p.webp", "picture", 1)]


def test_unknown_slot_kinds_are_ignored():
    slots = [
        MediaSlot(kind="audio", caption="nope"),
        MediaSlot(kind="", caption="blank"),
        MediaSlot(kind="file", caption="kept"),
    ]
    records = reconcile_manifest(slots, [_upload("a.gif", "image/gif")], PREFIX)

    assert _summary(records) == [("image", "/uploads/a.gif", "kept", 1)]


def test_start_order_offsets_appended_media():
    slots = build_slots(["youtube", "file"], ["", ""], ["https://yt/a", None])
    records = reconcile_manifest(slots, [_upload("b.mov", "video/quicktime")], PREFIX, start_order=7)

    assert [r.sort_order for r in records] == [7, 8]
    assert records[1].media_type == "video"


def test_reconcile_is_deterministic_and_total():
    slots = build_slots(["file", "youtube"], ["c1"], [])
    uploads = [_upload("x.jpg", "image/jpeg")]

    first = reconcile_manifest(slots, uploads, PREFIX)
    second = reconcile_manifest(slots, uploads, PREFIX)

    assert first == second
    assert reconcile_manifest([], [], PREFIX) == []
    assert reconcile_manifest(build_slots([], [], []), uploads, PREFIX) == []


def test_build_slots_fills_missing_captions_and_links():
    slots = build_slots(["file", "youtube", "file"], ["only first"], [None, "https://yt/z"])

    assert [s.caption for s in slots] == ["only first", "", ""]
    assert [s.youtube_link for s in slots] == [None, "https://yt/z", None]


def test_classify_upload_by_content_type():
    assert classify_upload("video/mp4") == "video"
    assert classify_upload("image/png") == "image"
    assert classify_upload("application/pdf") == "image"
    assert classify_upload(None) == "image"


def test_url_prefix_with_trailing_slash():
    records = reconcile_manifest(build_slots(["file"]), [_upload("z.png", "image/png")], "/media/")
    assert records[0].media_path == "/media/z.png"
