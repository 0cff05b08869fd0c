from pathlib import Path

from discourse_api.types.multipart import Attachment


class TestAttachment:
    def test_from_path(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text('{"a": 1}')
        attachment = Attachment.from_path(path)
        assert attachment.name == "file"
        assert attachment.data == b'{"a": 1}'
        assert attachment.filepath == path
        assert attachment.content_type == "application/json"

    def test_unknown_extension_has_no_content_type(self, tmp_path):
        path = tmp_path / "blob.zzz-unknown"
        path.write_bytes(b"\x00")
        attachment = Attachment.from_path(str(path))
        assert attachment.content_type is None
        assert attachment.to_part() == ("blob.zzz-unknown", b"\x00")

    def test_to_part_with_content_type(self):
        attachment = Attachment(name="thing", data=b"{}", filepath=Path("dir/myfile.json"), content_type="application/json")
        assert attachment.to_part() == ("myfile.json", b"{}", "application/json")

    def test_to_part_without_path(self):
        assert Attachment(name="thing", data=b"x").to_part() == (None, b"x")
