import logging

from tart.entity_fields import NATION_TAG, NationAccumulator
from tart.xml_scanner import CLOSE, OPEN, TEXT, scan_events


class RegionIndex:
    """
    Result of one pass over the nations dump, restricted to one region.

    endorsements: WA member -> nations it endorses, in document order.
    residents:    every nation in the region, WA member or not.

    Built once by build_region_index() and only read afterwards.
    """

    def __init__(self, region):
        self.region = region
        self.endorsements = {}
        self.residents = set()

    def add(self, record):
        if record.wa_member:
            self.endorsements[record.name] = record.endorsements
        self.residents.add(record.name)

    def is_member(self, nation):
        return nation in self.endorsements

    def members(self):
        return list(self.endorsements)

    def check_invariants(self):
        """Raises AssertionError if a WA member is missing from the residents."""
        missing = [n for n in self.endorsements if n not in self.residents]
        if missing:
            raise AssertionError(f"Members not recorded as residents: {missing}")

    def __repr__(self):
        return (
            f"RegionIndex(region={self.region!r}, members={len(self.endorsements)}, "
            f"residents={len(self.residents)})"
        )


def build_region_index(events, region):
    """
    Folds a sequence of scan events into a RegionIndex for `region`.

    `region` is lowercased and compared against the lowercased REGION text
    of each nation.
    Nations outside the region, or with no NAME, are dropped entirely.
    """
    region = region.lower()
    index = RegionIndex(region)
    nation = NationAccumulator()
    seen = 0

    for kind, value in events:
        if kind == OPEN:
            nation.open_tag(value)
        elif kind == TEXT:
            nation.text(value)
        elif kind == CLOSE:
            nation.close_tag(value)
            if value == NATION_TAG:
                seen += 1
                record = nation.record()
                if record.region == region and record.name:
                    index.add(record)
                nation.reset()

    logging.info(
        f"Scanned {seen} nations: {len(index.residents)} in '{region}', "
        f"{len(index.endorsements)} WA members."
    )
    return index


def ingest(chunks, region):
    """
    Scans the text chunks of a nations dump and returns the finished RegionIndex.

    Raises IngestionParseError if the dump is malformed; nothing is returned
    in that case.
    """
    logging.info(f"Starting ingestion for region '{region}'...")
    return build_region_index(scan_events(chunks), region)
