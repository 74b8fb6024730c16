import base64
import json

from securegen.transport import Transport, escape_newlines, pack, unescape_newlines, unpack

ARMORED = "-----BEGIN PGP MESSAGE-----\n\nwcBMA0abc\n=XyZ1\n-----END PGP MESSAGE-----\n"


def test_escape_and_unescape():
    escaped = escape_newlines("a\r\nb\nc")
    assert escaped == "a\\nb\\nc"
    assert unescape_newlines(escaped) == "a\nb\nc"
    assert unescape_newlines("a\\r\\nb") == "a\nb"


def test_pack_escaped_keeps_text():
    assert pack(ARMORED, Transport.ESCAPED) == ARMORED


def test_pack_base64():
    packed = pack(ARMORED, Transport.BASE64)
    assert "\n" not in packed
    assert base64.b64decode(packed).decode("utf-8") == ARMORED


def test_unpack_escaped():
    assert unpack(escape_newlines(ARMORED)) == ARMORED.strip()


def test_unpack_real_newlines():
    assert unpack("  " + ARMORED) == ARMORED.strip()


def test_unpack_base64():
    assert unpack(pack(ARMORED, Transport.BASE64)) == ARMORED.strip()


def test_unpack_json_line():
    line = json.dumps({"encrypted": ARMORED})
    assert unpack(line) == ARMORED.strip()


def test_unpack_json_line_with_base64():
    line = json.dumps({"encrypted": pack(ARMORED, Transport.BASE64)})
    assert unpack(line) == ARMORED.strip()


def test_unpack_leaves_unknown_text_alone():
    assert unpack("hello") == "hello"
    assert unpack("{not json") == "{not json"
