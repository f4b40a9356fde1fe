import io
import os

import pytest

from chatdesk.responses import ValidationError
from chatdesk.storage import (
    DEFAULT_FILE_SIZE,
    LocalAdapter,
    QiniuAdapter,
    StoredFile,
    detect_content_type,
    disk,
    file_type,
)

PNG_HEAD = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24
PDF_HEAD = b"%PDF-1.4\n%binary\n"


class FakeClient:
    def __init__(self):
        self.puts = []
        self.deleted = []

    def put(self, bucket, key, stream):
        self.puts.append((bucket, key, stream.read()))

    def delete(self, bucket, key):
        self.deleted.append((bucket, key))


def test_detect_png():
    assert detect_content_type(PNG_HEAD) == "image/png"


def test_detect_pdf():
    assert detect_content_type(PDF_HEAD) == "application/pdf"


def test_detect_plain_text():
    assert detect_content_type(b"hello world").startswith("text/plain")


def test_detect_binary_fallback():
    assert detect_content_type(b"\x00\x01\x02\x03zz").endswith("octet-stream")


def test_file_type_image_and_pdf():
    assert file_type(io.BytesIO(PNG_HEAD)) == "image"
    assert file_type(io.BytesIO(PDF_HEAD)) == "pdf"


def test_file_type_restores_position():
    stream = io.BytesIO(PNG_HEAD)
    file_type(stream)
    assert stream.read() == PNG_HEAD


def test_file_type_rejects_text():
    with pytest.raises(ValidationError) as info:
        file_type(io.BytesIO(b"just some text"))
    assert info.value.message == "不支持的文件类型"


def test_file_type_rejects_empty():
    with pytest.raises(ValidationError):
        file_type(io.BytesIO(b""))


def test_default_sizes():
    assert DEFAULT_FILE_SIZE[file_type(io.BytesIO(PNG_HEAD))] == 5 * 1024 * 1024
    assert DEFAULT_FILE_SIZE[file_type(io.BytesIO(PDF_HEAD))] == 20 * 1024 * 1024


def test_local_url_and_thumb():
    adapter = LocalAdapter("/srv/root/", "http://files.example.com")
    assert adapter.server_root == "/srv/root"
    assert adapter.url("a/b.png") == "http://files.example.com/a/b.png"
    assert adapter.thumb_url("a/b.png") == adapter.url("a/b.png")


def test_local_save_and_delete(tmp_path):
    adapter = LocalAdapter(str(tmp_path), "http://files.example.com")
    stored = adapter.save_upload(io.BytesIO(PNG_HEAD), "photo.png", "dir/")
    assert stored.name == "photo.png"
    assert stored.disk == "local"
    assert stored.path.startswith("dir/")
    assert stored.path.endswith(".png")
    full = os.path.join(str(tmp_path), stored.path)
    with open(full, "rb") as handle:
        assert handle.read() == PNG_HEAD
    adapter.delete(stored.path)
    assert not os.path.exists(full)


def test_local_save_without_directory(tmp_path):
    adapter = LocalAdapter(str(tmp_path), "http://files.example.com")
    stored = adapter.save_upload(io.BytesIO(b"data"), "a.pdf", "")
    assert "/" not in stored.path
    assert os.path.exists(os.path.join(str(tmp_path), stored.path))


def test_qiniu_url():
    adapter = QiniuAdapter("ak", "placeholder", "bucket", "https://cdn.example.com")
    assert adapter.url("/x.png") == "https://cdn.example.com/x.png"
    assert adapter.url("x.png") == "https://cdn.example.com/x.png"
    assert adapter.url("") == ""
    assert adapter.thumb_url("x.png") == adapter.url("x.png")


def test_qiniu_save_upload_uses_client():
    client = FakeClient()
    adapter = QiniuAdapter("ak", "placeholder", "bucket", "https://cdn.example.com", client)
    stored = adapter.save_upload(io.BytesIO(b"payload"), "clip.mp4", "media")
    bucket, key, content = client.puts[0]
    assert bucket == "bucket"
    assert key == stored.path
    assert content == b"payload"
    assert key.startswith("media/") and key.endswith(".mp4")
    assert stored.disk == "qiniu"
    adapter.delete(key)
    assert client.deleted == [("bucket", key)]


def test_qiniu_without_client_raises():
    adapter = QiniuAdapter("ak", "placeholder", "bucket", "https://cdn.example.com")
    with pytest.raises(RuntimeError):
        adapter.delete("x.png")


def test_disk_selection(tmp_path):
    local = LocalAdapter(str(tmp_path), "http://files.example.com")
    remote = QiniuAdapter("ak", "placeholder", "bucket", "https://cdn.example.com")
    adapters = {"local": local, "qiniu": remote}
    assert disk(adapters, "local") is local
    assert disk(adapters, "local", "qiniu") is remote


def test_disk_unknown():
    with pytest.raises(ValueError) as info:
        disk({}, "ftp")
    assert str(info.value) == "暂不支持该存储引擎:ftp"


def test_stored_file_defaults():
    stored = StoredFile(name="n", path="p", disk="local")
    assert (stored.type, stored.parent_id, stored.is_resource) == ("", 0, 0)