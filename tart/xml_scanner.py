"""
Forward-only event scanner over a chunked XML text stream.

ET.iterparse needs a file; the dump arrives as decompressed text chunks, so
this drives ET.XMLPullParser instead and turns its start/end events into a
flat (OPEN, tag) / (TEXT, content) / (CLOSE, tag) sequence in document order.

Character data is only known to be complete once the parser reports the next
start or end, so text is emitted lazily at that point. This gives the same
ordering a SAX parser would: an element's text comes right after its OPEN,
and text after a closing tag (the tail) comes before the next event.

Finished elements are cleared and detached from their parent, so the tree
never grows beyond the current path from the root.
"""
import xml.etree.ElementTree as ET

from tart.errors import IngestionParseError

OPEN = "open"
TEXT = "text"
CLOSE = "close"


class EventScanner:
    def __init__(self):
        self._parser = ET.XMLPullParser(events=("start", "end"))
        self._stack = []
        # (element, "text" | "tail") whose character data has not been emitted yet
        self._pending = None

    def feed(self, chunk):
        try:
            self._parser.feed(chunk)
        except ET.ParseError as e:
            raise IngestionParseError(f"Malformed nations dump: {e}") from e
        return self._drain()

    def close(self):
        try:
            self._parser.close()
        except ET.ParseError as e:
            raise IngestionParseError(f"Truncated or malformed nations dump: {e}") from e
        yield from self._drain()
        text = self._take_pending()
        if text:
            yield (TEXT, text)

    def _drain(self):
        # feed() queues parse errors; they surface here
        try:
            for event, elem in self._parser.read_events():
                text = self._take_pending()
                if text:
                    yield (TEXT, text)

                if event == "start":
                    yield (OPEN, elem.tag)
                    self._stack.append(elem)
                    self._pending = (elem, "text")
                else:
                    yield (CLOSE, elem.tag)
                    self._stack.pop()
                    self._pending = (elem, "tail")
        except ET.ParseError as e:
            raise IngestionParseError(f"Malformed nations dump: {e}") from e

    def _take_pending(self):
        if self._pending is None:
            return None

        elem, attr = self._pending
        self._pending = None
        if attr == "text":
            return elem.text

        text = elem.tail
        # Element is finished: drop it so the tree stays shallow
        elem.clear()
        if self._stack:
            self._stack[-1].remove(elem)
        return text


def scan_events(chunks):
    """
    Yields scan events for an iterable of text chunks.

    Chunks may split the document anywhere (inside a tag name, an entity
    reference, or a text node). Raises IngestionParseError on malformed or
    truncated markup; there is no partial result.
    """
    scanner = EventScanner()
    for chunk in chunks:
        yield from scanner.feed(chunk)
    yield from scanner.close()
