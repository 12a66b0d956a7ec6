import functions_framework
import json
import os
import logging
import threading

from tart import config
from tart.errors import IngestionParseError, InvalidQueryInput
from tart.publish import publish_pages
from tart.query import load_index, unendorsed, validate_nation

# Configure logging
logging.basicConfig(level=logging.INFO)

# Index for the lifetime of this instance; filled by the first successful ingestion
_index = None
_index_lock = threading.Lock()


def get_index():
    global _index
    if _index is None:
        # Requests are served on several threads; only one of them ingests
        with _index_lock:
            if _index is None:
                _index = load_index()
    return _index


def _nation_from_request(request):
    nation = request.args.get("nation")
    if nation:
        return nation
    # /<nation> or /<prefix>/<nation>; a bare /<prefix> names no nation
    segments = [s for s in request.path.split("/") if s]
    if segments and segments[0] == config.page_prefix():
        segments = segments[1:]
    return segments[-1] if segments else ""


@functions_framework.http
def tart(request):
    """
    Returns the WA members of the region that have not endorsed the requested nation.
    """
    nation = _nation_from_request(request)

    try:
        validate_nation(nation)
    except InvalidQueryInput as e:
        return f"Bad Request: {e}", 400

    try:
        index = get_index()
    except IngestionParseError:
        logging.exception("Failed to ingest nations dump.")
        return "Internal Server Error: nations dump could not be parsed", 500
    except Exception as e:
        logging.exception("Failed to load nations dump.")
        return f"Error: {str(e)}", 500

    return json.dumps(unendorsed(index, nation)), 200, {"Content-Type": "application/json"}


@functions_framework.http
def publish_tart(request):
    """
    Ingests the nations dump and writes one JSON page per resident nation to GCS.
    """
    bucket_name = os.environ.get("BUCKET_NAME")

    if not bucket_name:
        logging.error("Missing configuration environment variables.")
        return "Internal Server Error: Missing config", 500

    try:
        index = load_index()
        count = publish_pages(index, bucket_name, config.page_prefix())
        return f"Successfully published {count} pages.", 200

    except Exception as e:
        logging.exception("Failed to publish pages.")
        return f"Error: {str(e)}", 500
