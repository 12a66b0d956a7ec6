import codecs
import logging
import zlib

import requests

from tart.config import CHUNK_SIZE
from tart.errors import IngestionParseError


def gunzip_chunks(byte_chunks):
    """Decompresses a gzip byte stream chunk by chunk."""
    # 16 + MAX_WBITS: expect a gzip header and trailer
    decompressor = zlib.decompressobj(16 + zlib.MAX_WBITS)
    try:
        for chunk in byte_chunks:
            data = decompressor.decompress(chunk)
            if data:
                yield data
        tail = decompressor.flush()
    except zlib.error as e:
        raise IngestionParseError(f"Corrupt gzip stream: {e}") from e
    if tail:
        yield tail
    # eof is only set once the trailer (CRC and length) has been checked
    if not decompressor.eof:
        raise IngestionParseError("Gzip stream ended before its trailer.")


def decode_chunks(byte_chunks, encoding="utf-8"):
    """Decodes bytes to text; multi-byte characters may straddle chunks."""
    decoder = codecs.getincrementaldecoder(encoding)()
    for chunk in byte_chunks:
        text = decoder.decode(chunk)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def fetch_dump(url, user_agent, chunk_size=CHUNK_SIZE):
    """
    Streams the gzipped nations dump from `url` and yields decoded text chunks.

    No retries: HTTP and connection errors propagate as requests exceptions.
    """
    logging.info(f"Starting download from {url}")
    with requests.get(url, headers={"User-Agent": user_agent}, stream=True, timeout=60) as r:
        r.raise_for_status()
        yield from decode_chunks(gunzip_chunks(r.iter_content(chunk_size=chunk_size)))
    logging.info("Download complete.")


def read_dump(path, chunk_size=CHUNK_SIZE):
    """Same as fetch_dump, for a nations.xml.gz already on disk."""
    logging.info(f"Reading dump from {path}")

    def _read(f):
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk

    with open(path, "rb") as f:
        yield from decode_chunks(gunzip_chunks(_read(f)))
