"""
Blob storage for uploaded images.

BlobStore is the interface the upload views talk to; LocalBlobStore keeps
objects on disk under UPLOAD_FOLDER. Another backend only has to implement
put/open/url_for.
"""
from __future__ import annotations

import mimetypes
import os
import time
from typing import BinaryIO, Optional, Tuple

from flask import current_app
from werkzeug.utils import secure_filename


class BlobNotFound(LookupError):
    pass


class BlobStore:
    def put(self, filename: str, stream: BinaryIO, content_type: Optional[str] = None) -> str:
        """Store the stream and return the object key."""
        raise NotImplementedError

    def open(self, key: str) -> Tuple[BinaryIO, str]:
        """Return (binary stream, content type). Raises BlobNotFound."""
        raise NotImplementedError

    def url_for(self, key: str) -> str:
        raise NotImplementedError

    @staticmethod
    def make_key(filename: str) -> str:
        """<epoch ms>-<sanitized original name>"""
        safe = secure_filename(filename or "") or "upload"
        return f"{int(time.time() * 1000)}-{safe}"


class LocalBlobStore(BlobStore):
    def __init__(self, root: str, base_url: str = "/file"):
        self.root = os.path.abspath(root)
        self.base_url = base_url.rstrip("/")
        os.makedirs(self.root, exist_ok=True)

    def _path(self, key: str) -> str:
        safe = secure_filename(key)
        if not safe or safe != key:
            raise BlobNotFound(key)
        return os.path.join(self.root, safe)

    def put(self, filename, stream, content_type=None):
        key = self.make_key(filename)
        with open(os.path.join(self.root, key), "wb") as fh:
            while True:
                chunk = stream.read(64 * 1024)
                if not chunk:
                    break
                fh.write(chunk)
        return key

    def open(self, key):
        path = self._path(key)
        if not os.path.isfile(path):
            raise BlobNotFound(key)
        content_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
        return open(path, "rb"), content_type

    def url_for(self, key):
        return f"{self.base_url}/{key}"


def get_blob_store() -> BlobStore:
    return current_app.extensions["blob_store"]
