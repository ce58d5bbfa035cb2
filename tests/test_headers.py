import pytest

from imgsort.bmp import FileHeader, InfoHeader, UnsupportedFormat


def _info_bytes(**overrides):
    fields = {
        "size": 40,
        "width": 4,
        "height": 2,
        "planes": 1,
        "bpp": 24,
        "compression": 0,
        "image_size": 24,
        "res_horz": 3780,
        "res_vert": 3780,
        "palette": 0,
        "important": 0,
    }
    fields.update(overrides)
    return b"".join(
        [
            fields["size"].to_bytes(4, "little"),
            fields["width"].to_bytes(4, "little", signed=True),
            fields["height"].to_bytes(4, "little", signed=True),
            fields["planes"].to_bytes(2, "little"),
            fields["bpp"].to_bytes(2, "little"),
            fields["compression"].to_bytes(4, "little"),
            fields["image_size"].to_bytes(4, "little"),
            fields["res_horz"].to_bytes(4, "little", signed=True),
            fields["res_vert"].to_bytes(4, "little", signed=True),
            fields["palette"].to_bytes(4, "little"),
            fields["important"].to_bytes(4, "little"),
        ]
    )


def test_file_header_layout():
    data = FileHeader(file_size=0x01020304, data_offset=54).pack()
    assert data == b"BM" + bytes([4, 3, 2, 1]) + bytes(4) + bytes([54, 0, 0, 0])


def test_file_header_ignores_reserved():
    data = b"BM" + (100).to_bytes(4, "little") + b"\xde\xad\xbe\xef" + (54).to_bytes(4, "little")
    header = FileHeader.unpack(data)
    assert header == FileHeader(file_size=100, data_offset=54)


def test_file_header_bad_magic():
    with pytest.raises(UnsupportedFormat):
        FileHeader.unpack(b"BA" + bytes(12))


def test_info_header_layout():
    header = InfoHeader(width=3, height=-1, image_size=12)
    data = header.pack()
    assert len(data) == 40
    assert data == _info_bytes(width=3, height=-1, image_size=12)
    assert InfoHeader.unpack(data) == header


@pytest.mark.parametrize(
    "override",
    [
        {"size": 108},
        {"planes": 2},
        {"bpp": 8},
        {"bpp": 32},
        {"compression": 1},
        {"palette": 256},
    ],
)
def test_info_header_rejects_unsupported(override):
    with pytest.raises(UnsupportedFormat):
        InfoHeader.unpack(_info_bytes(**override))


def test_info_header_keeps_resolution():
    header = InfoHeader.unpack(_info_bytes(res_horz=2835, res_vert=1000, important=7))
    assert (header.res_horz, header.res_vert, header.important_colors) == (2835, 1000, 7)
