from tart.config import NON_MEMBER_STATUS


def normalize_nation(name):
    # The dump uses display names ("Testlandia Prime"); API keys use "testlandia_prime"
    if name is None:
        return None
    return name.lower().replace(" ", "_")


def normalize_region(region):
    # Regions are compared lowercased, spaces kept
    if region is None:
        return None
    return region.lower()


def is_wa_member(status):
    """
    UNSTATUS is "WA Member", "WA Delegate" or "Non-member".
    Anything except the exact non-member text counts as membership.
    """
    return status != NON_MEMBER_STATUS


def parse_endorsements(text):
    """Returns the ordered list of nations named in an ENDORSEMENTS field."""
    if not text:
        return []
    return normalize_nation(text).split(",")
