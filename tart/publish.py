import json
import logging

from google.cloud import storage

from tart.query import unendorsed


def build_pages(index):
    """One answer per resident nation, keyed by nation."""
    return {nation: unendorsed(index, nation) for nation in sorted(index.residents)}


def publish_pages(index, bucket_name, prefix):
    """
    Uploads <prefix>/<nation>.json for every resident of the region.
    Returns the number of pages written.
    """
    storage_client = storage.Client()
    bucket = storage_client.bucket(bucket_name)

    pages = build_pages(index)
    logging.info(f"Uploading {len(pages)} pages to gs://{bucket_name}/{prefix}/")

    for nation, nations in pages.items():
        blob = bucket.blob(f"{prefix}/{nation}.json")
        blob.upload_from_string(json.dumps(nations), content_type="application/json")

    logging.info("Upload complete.")
    return len(pages)
