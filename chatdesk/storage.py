"""Storage of uploaded files on local disk or an object store."""

from __future__ import annotations

import os
import secrets
import shutil
import string
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import BinaryIO, Protocol

from chatdesk.consts import STORAGE_LOCAL, STORAGE_QINIU, FileType
from chatdesk.responses import ValidationError

PATH_SEPARATOR = "/"
SNIFF_LENGTH = 512

DEFAULT_FILE_SIZE: dict[str, int] = {
    FileType.IMAGE.value: 5 * 1024 * 1024,
    FileType.VIDEO.value: 10 * 1024 * 1024,
    FileType.AUDIO.value: 5 * 1024 * 1024,
    FileType.PDF.value: 20 * 1024 * 1024,
}

UNSUPPORTED_FILE_TYPE = "不支持的文件类型"


@dataclass
class StoredFile:
    """A file record produced by saving an upload."""

    name: str = ""
    path: str = ""
    disk: str = ""
    type: str = ""
    parent_id: int = 0
    customer_id: int = 0
    from_id: int = 0
    from_model: str = ""
    is_resource: int = 0


# --- content sniffing -------------------------------------------------------

_WHITESPACE = b"\t\n\x0c\r "

_HTML_TAGS = (
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
)

_EXACT_SIGNATURES = (
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\xfe\xff", "text/plain; charset=utf-16be"),
    (b"\xff\xfe", "text/plain; charset=utf-16le"),
    (b"\xef\xbb\xbf", "text/plain; charset=utf-8"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"\x00\x00\x02\x00", "image/x-icon"),
    (b"BM", "image/bmp"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b".snd", "audio/basic"),
    (b"OggS\x00", "application/ogg"),
    (b"MThd\x00\x00\x00\x06", "audio/midi"),
    (b"ID3", "audio/mpeg"),
    (b"\x1aE\xdf\xa3", "video/webm"),
    (b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    (b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    (b"\x00asm", "application/wasm"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"PK\x03\x04", "application/zip"),
)

_RIFF_SIGNATURES = (
    (b"WEBPVP", "image/webp"),
    (b"AVI ", "video/avi"),
    (b"WAVE", "audio/wave"),
)

_BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)


def _html_type(data: bytes) -> str | None:
    for tag in _HTML_TAGS:
        if len(data) <= len(tag):
            continue
        if data[: len(tag)].upper() == tag and data[len(tag)] in b" >":
            return "text/html; charset=utf-8"
    if data.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"
    return None


def _is_mp4(data: bytes) -> bool:
    if len(data) < 12:
        return False
    box_size = int.from_bytes(data[:4], "big")
    if len(data) < box_size or box_size % 4 != 0:
        return False
    if data[4:8] != b"ftyp":
        return False
    for start in range(8, box_size, 4):
        if start == 12:
            continue
        if data[start : start + 3] == b"mp4":
            return True
    return False


def detect_content_type(data: bytes) -> str:
    """Guess a MIME type from the first bytes of a file."""
    data = bytes(data[:SNIFF_LENGTH])
    html = _html_type(data.lstrip(_WHITESPACE))
    if html is not None:
        return html
    for signature, mime in _EXACT_SIGNATURES:
        if data.startswith(signature):
            return mime
    if data.startswith(b"FORM") and data[8:12] == b"AIFF":
        return "audio/aiff"
    if data.startswith(b"RIFF"):
        for signature, mime in _RIFF_SIGNATURES:
            if data[8 : 8 + len(signature)] == signature:
                return mime
    if _is_mp4(data):
        return "video/mp4"
    if not any(byte in _BINARY_BYTES for byte in data):
        return "text/plain; charset=utf-8"
    return "application/octet-stream"


def file_type(stream: BinaryIO) -> str:
    """Classify an upload as one of the supported file types."""
    position = stream.tell() if stream.seekable() else None
    head = stream.read(SNIFF_LENGTH)
    if position is not None:
        stream.seek(position)
    if not head:
        raise ValidationError(UNSUPPORTED_FILE_TYPE)
    mime = detect_content_type(head)
    major, slash, minor = mime.partition("/")
    if not slash:
        raise ValidationError(UNSUPPORTED_FILE_TYPE)
    kind = minor if major == "application" else major
    if kind not in DEFAULT_FILE_SIZE:
        raise ValidationError(UNSUPPORTED_FILE_TYPE)
    return kind


# --- adapters ---------------------------------------------------------------


class StorageAdapter(ABC):
    """Where uploaded files are kept and how they are addressed."""

    @abstractmethod
    def url(self, path: str) -> str:
        """Public URL of a stored file."""

    def thumb_url(self, path: str) -> str:
        """URL of a thumbnail of a stored file."""
        return self.url(path)

    @abstractmethod
    def save_upload(self, stream: BinaryIO, filename: str, relative_path: str) -> StoredFile:
        """Store an uploaded file under a directory and describe it."""

    @abstractmethod
    def delete(self, path: str) -> None:
        """Remove a stored file."""


def _random_letters(length: int) -> str:
    alphabet = string.ascii_letters
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _base36(number: int) -> str:
    digits = string.digits + string.ascii_lowercase
    out = []
    while number:
        number, rest = divmod(number, 36)
        out.append(digits[rest])
    return "".join(reversed(out)) or "0"


class LocalAdapter(StorageAdapter):
    """Files kept below the web server's root directory."""

    def __init__(self, server_root: str, host: str) -> None:
        if server_root.endswith(PATH_SEPARATOR):
            server_root = server_root[:-1]
        self.server_root = server_root
        self.host = host

    def url(self, path: str) -> str:
        return self.host + PATH_SEPARATOR + path

    def thumb_url(self, path: str) -> str:
        return self.url(path)

    def delete(self, path: str) -> None:
        os.remove(self.server_root + PATH_SEPARATOR + path)

    def save_upload(self, stream: BinaryIO, filename: str, relative_path: str) -> StoredFile:
        if relative_path.endswith(PATH_SEPARATOR):
            relative_path = relative_path[:-1]
        directory = self.server_root + PATH_SEPARATOR + relative_path
        os.makedirs(directory, exist_ok=True)
        extension = os.path.splitext(filename)[1]
        name = (_base36(time.time_ns()) + _random_letters(6)).lower() + extension
        with open(os.path.join(directory, name), "wb") as target:
            shutil.copyfileobj(stream, target)
        if relative_path:
            relative_path += PATH_SEPARATOR
        return StoredFile(name=filename, path=relative_path + name, disk=STORAGE_LOCAL)


class ObjectStoreClient(Protocol):
    """The calls an object-store client must offer."""

    def put(self, bucket: str, key: str, stream: BinaryIO) -> None: ...

    def delete(self, bucket: str, key: str) -> None: ...


class QiniuAdapter(StorageAdapter):
    """Files kept in a Qiniu bucket and served from its domain."""

    def __init__(
        self,
        ak: str,
        sk: str,
        bucket: str,
        url: str,
        client: ObjectStoreClient | None = None,
    ) -> None:
        self.ak = ak
        self.sk = sk
        self.bucket = bucket
        self.base_url = url
        self.client = client

    def url(self, path: str) -> str:
        if not path:
            return ""
        if path.startswith("/"):
            return self.base_url + path
        return self.base_url + "/" + path

    def thumb_url(self, path: str) -> str:
        return self.url(path)

    def _require_client(self) -> ObjectStoreClient:
        if self.client is None:
            raise RuntimeError("no object-store client configured")
        return self.client

    def delete(self, path: str) -> None:
        self._require_client().delete(self.bucket, path)

    def save_upload(self, stream: BinaryIO, filename: str, relative_path: str) -> StoredFile:
        client = self._require_client()
        if not relative_path.endswith(PATH_SEPARATOR):
            relative_path += PATH_SEPARATOR
        extension = os.path.splitext(filename)[1].lstrip(".")
        key = relative_path + _random_letters(32) + "." + extension
        client.put(self.bucket, key, stream)
        return StoredFile(name=filename, path=key, disk=STORAGE_QINIU)


def disk(adapters: Mapping[str, StorageAdapter], default: str, *args: str) -> StorageAdapter:
    """Pick the adapter named first in args, or the default one."""
    name = args[0] if args else default
    try:
        return adapters[name]
    except KeyError:
        raise ValueError("暂不支持该存储引擎:" + name) from None