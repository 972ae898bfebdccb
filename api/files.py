"""
Image upload and retrieval through the configured BlobStore.
"""
from __future__ import annotations

import logging
import os

from flask import Blueprint, request, jsonify, abort, current_app, send_file

from utils.blob_store import BlobNotFound, get_blob_store
from utils.decorators import jwt_required

logger = logging.getLogger(__name__)

bp = Blueprint("files", __name__)


def _allowed(filename: str) -> bool:
    ext = os.path.splitext(filename)[1].lstrip(".").lower()
    return ext in current_app.config["ALLOWED_IMAGE_EXTENSIONS"]


@bp.post("/upload")
@jwt_required()
def upload_image(identity):
    """
    Upload an image
    ---
    tags: [Files]
    security:
      - Bearer: []
    consumes:
      - multipart/form-data
    parameters:
      - in: formData
        name: file
        type: file
        required: true
    responses:
      200: { description: "Uploaded; returns {url}" }
      400: { description: No file or unsupported file type }
      500: { description: Error uploading file }
    """
    file = request.files.get("file")
    if file is None or not file.filename:
        abort(400, description="No file provided")
    if not _allowed(file.filename):
        abort(400, description="Unsupported file type")

    store = get_blob_store()
    try:
        key = store.put(file.filename, file.stream, file.mimetype)
    except OSError:
        logger.exception("upload failed for %s", identity.username)
        abort(500, description="Error uploading file")

    logger.info("%s uploaded %s", identity.username, key)
    return jsonify({"url": store.url_for(key)}), 200


@bp.get("/file/<filename>")
def get_image(filename: str):
    """
    Retrieve an uploaded image by filename
    ---
    tags: [Files]
    parameters:
      - in: path
        name: filename
        type: string
        required: true
    responses:
      200: { description: The image bytes }
      404: { description: File not found }
    """
    try:
        stream, content_type = get_blob_store().open(filename)
    except BlobNotFound:
        abort(404, description="File not found")
    return send_file(stream, mimetype=content_type, download_name=filename)
