"""
Flask application and proof registry endpoints.

This is the host boundary: every request gets its caller principal and a
timestamp resolved here, inputs are decoded, and registry errors are turned
into HTTP responses.
"""

import io
import json
import logging
from flask import Flask, abort, jsonify, make_response, request, send_file
from werkzeug.exceptions import HTTPException

from .config import config
from .errors import ContentTooLarge, DuplicateDigest
from .host import context_from_request
from .registry import enumerate_all, get_full, get_metadata, register
from .store import get_store
from .validation import compute_sha256, decode_content, parse_metadata, require_digest

logger = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = config.MAX_REQUEST_SIZE


# -------------------------------
# Request / Response Hooks
# -------------------------------


@app.before_request
def handle_preflight():
    """Answer CORS preflight requests without reaching the endpoints."""
    if request.method == "OPTIONS":
        return make_response("", 204)
    return None


@app.after_request
def add_cors_headers(resp):
    resp.headers["Access-Control-Allow-Origin"] = config.CORS_ALLOW_ORIGIN
    resp.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    resp.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return resp


@app.errorhandler(HTTPException)
def handle_http_error(err):
    """Render every HTTP error as ``{"error": <description>}``."""
    resp = err.get_response()
    resp.data = json.dumps({"error": err.description})
    resp.content_type = "application/json"
    return resp


# -------------------------------
# Registry Endpoints
# -------------------------------


@app.route("/health")
def health():
    """
    Liveness check.

    Returns:
        JSON ``{"status": "ok", "entries": <number of registered digests>}``
    """
    return jsonify({"status": "ok", "entries": len(get_store())})


@app.route("/register", methods=["POST"])
def register_digest():
    """
    Register a digest with its metadata and optional file content.

    Accepts two request shapes:

    Multipart form:
        file: Optional uploaded file. Its bytes become the stored content.
        digest (or hash): Optional. Computed as SHA256 of ``file`` if omitted.
        content_type: Optional. Defaults to the uploaded file's mimetype.
        name: Optional. Defaults to the uploaded file's name.
        description, owner_name, owner_dob, royalty_fee, has_royalty,
        contact_details: Descriptive fields.

    JSON body:
        {
            "digest": "<hash>",
            "content": "<base64>" | null,
            "content_type": "text/plain",
            "name": "...",
            "description": "...",
            "owner_name": "...",
            "owner_dob": "...",
            "royalty_fee": "...",
            "has_royalty": true,
            "contact_details": "..."
        }

    Request Headers:
        X-Caller-Principal (configurable): Caller identity, honoured only when
            TRUST_CALLER_HEADER is set. Anonymous otherwise.

    Returns:
        201 with ``{"message": "Hash registered successfully", "digest": "<hash>", "hash": "<hash>"}``

    Raises:
        400: Malformed request
        409: Digest already registered
        413: Content larger than 2 MiB, or request body over MAX_REQUEST_SIZE
    """
    if request.files or request.form:
        digest, content, metadata = _parse_form_request()
    else:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            logger.warning("Register request without form data or JSON object body")
            abort(400, "Expected multipart form data or a JSON object")
        digest = require_digest(data)
        content = decode_content(data.get("content"))
        metadata = parse_metadata(data)

    context = context_from_request(request)
    logger.info(f"Register requested: digest='{digest}', caller={context.caller}")

    try:
        register(get_store(), context, digest, content, **metadata)
    except ContentTooLarge as e:
        abort(413, str(e))
    except DuplicateDigest:
        abort(409, "Hash already registered")

    resp = jsonify({"message": "Hash registered successfully", "digest": digest, "hash": digest})
    resp.status_code = 201
    return resp


@app.route("/files")
def list_files():
    """
    List every registered entry.

    Returns:
        JSON array of ``[digest, entry]`` pairs. ``content`` is always null.
    """
    pairs = enumerate_all(get_store())
    logger.debug(f"Listing {len(pairs)} entries")
    return jsonify([[digest, entry.to_dict()] for digest, entry in pairs])


@app.route("/files/<digest>")
def get_file(digest):
    """
    Get the full entry for a digest, including base64 content.

    Raises:
        404: Digest not registered
    """
    entry = get_full(get_store(), digest)
    if entry is None:
        abort(404, "Hash not found")
    return jsonify(entry.to_dict())


@app.route("/files/<digest>/metadata")
def get_file_metadata(digest):
    """
    Get the entry for a digest without its content.

    Raises:
        404: Digest not registered
    """
    entry = get_metadata(get_store(), digest)
    if entry is None:
        abort(404, "Hash not found")
    return jsonify(entry.to_dict())


@app.route("/files/<digest>/content")
def get_file_content(digest):
    """
    Download the stored file bytes for a digest.

    The response mimetype is the entry's ``content_type``.

    Raises:
        404: Digest not registered, or registered without content
    """
    entry = get_full(get_store(), digest)
    if entry is None:
        abort(404, "Hash not found")
    if entry.content is None:
        abort(404, "File content not available")

    resp = send_file(
        io.BytesIO(entry.content),
        mimetype=entry.content_type or "application/octet-stream",
        as_attachment=True,
        download_name=entry.name or digest,
    )
    logger.info(f"Content sent: digest='{digest}', size={len(entry.content)} bytes")
    return resp


@app.route("/verify", methods=["POST"])
def verify():
    """
    Check whether a digest is registered.

    Request Body:
        {"hash": "<hash>"} (``digest`` is accepted too)

    Returns:
        The entry without content.

    Raises:
        400: No hash in the body
        404: Digest not registered
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, "Invalid request format")
    digest = require_digest(data)

    logger.info(f"Verifying hash: {digest}")
    entry = get_metadata(get_store(), digest)
    if entry is None:
        abort(404, "Hash not found")
    return jsonify(entry.to_dict())


def _parse_form_request():
    upload = request.files.get("file")
    content = upload.read() if upload is not None else None

    form = request.form.to_dict()
    if not (form.get("digest") or form.get("hash")):
        if not content:
            abort(400, "Hash is required")
        form["digest"] = compute_sha256(content)
        logger.debug(f"Computed digest for upload: {form['digest']}")
    digest = require_digest(form)

    if upload is not None:
        form.setdefault("content_type", upload.mimetype or "")
        if not form.get("name"):
            form["name"] = upload.filename or ""
    return digest, content, parse_metadata(form)
