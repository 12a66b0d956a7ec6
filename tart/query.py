import argparse
import json
import logging

from tart import config
from tart.dump_stream import fetch_dump, read_dump
from tart.errors import InvalidQueryInput
from tart.region_index import ingest


def validate_nation(nation):
    if not nation:
        raise InvalidQueryInput("A nation identifier is required.")


def unendorsed(index, nation):
    """
    Returns the other WA members of the region that have not endorsed `nation`.

    If `nation` is not itself a WA member of the region, every WA member is
    returned. Order is the order members appeared in the dump. A member never
    appears in its own answer, whether or not it lists itself.

    `nation` must already be in dump key form ("testlandia_prime"); it is not
    normalized here, so a display name simply matches nobody.
    """
    validate_nation(nation)

    if not index.is_member(nation):
        return index.members()

    return [
        member
        for member, endorsed in index.endorsements.items()
        if member != nation and nation not in endorsed
    ]


def load_index(dump_path=None, region=None):
    region = region or config.target_region()
    if dump_path:
        chunks = read_dump(dump_path, config.chunk_size())
    else:
        chunks = fetch_dump(config.dump_url(), config.user_agent(), config.chunk_size())
    return ingest(chunks, region)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = argparse.ArgumentParser(description="List WA members who have not endorsed a nation.")
    parser.add_argument("nation", type=str, help="Nation in dump key form, e.g. testlandia_prime.")
    parser.add_argument("--dump", type=str, default=None, help="Local nations.xml.gz instead of downloading.")
    parser.add_argument("--region", type=str, default=None, help="Region to index (default: TART_REGION).")
    args = parser.parse_args()

    index = load_index(args.dump, args.region)
    print(json.dumps(unendorsed(index, args.nation), indent=2))
