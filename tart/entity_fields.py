from typing import List, NamedTuple, Optional

from tart.normalization_logic import (
    is_wa_member,
    normalize_nation,
    normalize_region,
    parse_endorsements,
)

NATION_TAG = "NATION"

# Field tag -> transform applied to its text
FIELD_TRANSFORMS = {
    "NAME": normalize_nation,
    "REGION": normalize_region,
    "UNSTATUS": is_wa_member,
    "ENDORSEMENTS": parse_endorsements,
}

FIELD_ATTRS = {
    "NAME": "name",
    "REGION": "region",
    "UNSTATUS": "wa_member",
    "ENDORSEMENTS": "endorsements",
}


class NationRecord(NamedTuple):
    name: Optional[str]
    region: Optional[str]
    wa_member: bool
    endorsements: List[str]


class NationAccumulator:
    """
    Collects the fields of the <NATION> element currently being scanned.

    Only the most recently opened tag is tracked, not a full stack: the four
    fields of interest are leaf elements and never nest inside each other.
    A closing tag of any kind clears the current tag, so text that follows a
    field's close is ignored.
    """

    def __init__(self):
        self.current_tag = None
        self.reset()

    def reset(self):
        self.name = None
        self.region = None
        self.wa_member = None
        self.endorsements = None

    def open_tag(self, tag):
        self.current_tag = tag

    def close_tag(self, tag):
        self.current_tag = None

    def text(self, content):
        transform = FIELD_TRANSFORMS.get(self.current_tag)
        if transform is None:
            return
        setattr(self, FIELD_ATTRS[self.current_tag], transform(content))

    def record(self):
        # An absent UNSTATUS means non-member; absent ENDORSEMENTS means none
        return NationRecord(
            name=self.name,
            region=self.region,
            wa_member=bool(self.wa_member),
            endorsements=list(self.endorsements) if self.endorsements else [],
        )
