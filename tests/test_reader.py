import io

import pytest

from wiretext.exceptions import CaptureReadError
from wiretext.reader import decode_capture_bytes, read_capture_lines, read_capture_text, split_lines

TEXT = "Frame 1: 60 bytes on wire\n    Source Address: 10.0.0.1\n"


@pytest.mark.parametrize(
    "data",
    [
        TEXT.encode("utf-8"),
        b"\xef\xbb\xbf" + TEXT.encode("utf-8"),
        b"\xff\xfe" + TEXT.encode("utf-16-le"),
        b"\xfe\xff" + TEXT.encode("utf-16-be"),
    ],
)
def test_decode_by_byte_order_mark(data):
    assert decode_capture_bytes(data) == TEXT


def test_invalid_bytes_are_replaced():
    assert decode_capture_bytes(b"ok \xff\xfe\xfd").startswith("ok ")
    assert "\ufffd" in decode_capture_bytes(b"bad \xc3")


def test_split_lines_handles_both_line_endings():
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
    assert split_lines("") == [""]


def test_read_path_and_stream(tmp_path):
    path = tmp_path / "capture.txt"
    path.write_bytes(b"\xff\xfe" + TEXT.encode("utf-16-le"))
    assert read_capture_text(path) == TEXT
    assert read_capture_text(str(path)) == TEXT
    assert read_capture_text(io.BytesIO(TEXT.encode("utf-8"))) == TEXT
    assert read_capture_lines(path) == ["Frame 1: 60 bytes on wire", "    Source Address: 10.0.0.1", ""]


def test_unreadable_source(tmp_path):
    with pytest.raises(CaptureReadError) as info:
        read_capture_text(tmp_path / "nope.txt")
    assert "nope.txt" in str(info.value.context)


def test_text_stream_is_rejected():
    with pytest.raises(CaptureReadError) as info:
        read_capture_text(io.StringIO(TEXT))
    assert "expected bytes" in str(info.value)
    assert info.value.suggestion


def test_source_without_read_is_rejected():
    with pytest.raises(CaptureReadError):
        read_capture_text(12345)
