import os

from tart import __version__

# Defaults; every value can be overridden through the environment
DUMP_URL = "https://www.nationstates.net/pages/nations.xml.gz"
TARGET_REGION = "the south pacific"
NON_MEMBER_STATUS = "Non-member"
CHUNK_SIZE = 64 * 1024
PAGE_PREFIX = "tart"


def target_region():
    return os.environ.get("TART_REGION", TARGET_REGION).lower()


def dump_url():
    return os.environ.get("TART_DUMP_URL", DUMP_URL)


def chunk_size():
    return int(os.environ.get("TART_CHUNK_SIZE", CHUNK_SIZE))


def page_prefix():
    return os.environ.get("TART_PREFIX", PAGE_PREFIX)


def user_agent():
    """
    NationStates rejects requests without an identifying User-Agent.
    TART_CONTACT should name whoever runs the deployment (nation or email).
    """
    agent = f"swan-tart/{__version__}"
    contact = os.environ.get("TART_CONTACT")
    if contact:
        agent += f" (by:{contact})"
    return agent
