"""Depth-tracking pull reader over ``xml.etree.ElementTree.XMLPullParser``.

The byte source is fed to the pull parser in chunks, so memory is bounded by
the element currently being read (callers clear finished subtrees). Element
names are reported without their namespace.

An empty or whitespace-only source is an empty document with no events.

Depth is symmetric: the root element's start and end are both depth 1, its
children's start and end are depth 2, and so on. Empty elements still yield a
start and an end event.
"""

import xml.etree.ElementTree as ET
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import IoError, UnexpectedEofError, XmlError

CHUNK_SIZE = 64 * 1024

START = "start"
END = "end"


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


@dataclass
class XmlEvent:
    kind: str
    name: str
    depth: int
    element: ET.Element


class XmlReader:
    """Pull events one at a time with explicit depth.

    Parameters
    ----------
    source : readable
        Binary or text stream with ``read(size)``
    chunk_size : int
        Bytes fed to the parser per read
    """

    def __init__(self, source, chunk_size: int = CHUNK_SIZE):
        self._source = source
        self._chunk_size = chunk_size
        self._parser = ET.XMLPullParser(events=(START, END))
        self._pending = deque()
        self._peeked: Optional[XmlEvent] = None
        self._parse_depth = 0
        # Depth of the innermost element whose start has been consumed
        self.depth = 0
        self._eof = False
        # Whether any non-whitespace input has been fed
        self._has_content = False
        self.root: Optional[ET.Element] = None

    # -------------------------------------------------------------------------
    # Event stream
    # -------------------------------------------------------------------------

    def _fill(self) -> bool:
        """Feed the parser until events are available. False at end of document."""
        while not self._pending:
            if self._eof:
                return False
            try:
                chunk = self._source.read(self._chunk_size)
            except OSError as exc:
                raise IoError(f"read failed: {exc}") from exc
            if not chunk and not self._has_content:
                self._eof = True
                return False
            try:
                if chunk:
                    self._has_content = self._has_content or bool(chunk.strip())
                    self._parser.feed(chunk)
                else:
                    self._eof = True
                    self._parser.close()
                self._pending.extend(self._parser.read_events())
            except ET.ParseError as exc:
                self._eof = True
                raise XmlError(str(exc)) from exc
        return True

    def _next_event(self) -> Optional[XmlEvent]:
        if not self._fill():
            return None
        kind, element = self._pending.popleft()
        if kind == START:
            self._parse_depth += 1
            depth = self._parse_depth
            if self.root is None:
                self.root = element
        else:
            depth = self._parse_depth
            self._parse_depth -= 1
        return XmlEvent(kind, local_name(element.tag), depth, element)

    def read_event(self) -> Optional[XmlEvent]:
        """Next event, or None at end of document."""
        if self._peeked is not None:
            event, self._peeked = self._peeked, None
        else:
            event = self._next_event()
        if event is not None:
            self.depth = event.depth if event.kind == START else event.depth - 1
        return event

    def peek_event(self) -> Optional[XmlEvent]:
        if self._peeked is None:
            self._peeked = self._next_event()
        return self._peeked

    def _require_event(self, context: str) -> XmlEvent:
        event = self.read_event()
        if event is None:
            raise UnexpectedEofError(f"document ended inside {context}")
        return event

    # -------------------------------------------------------------------------
    # Navigation primitives
    # -------------------------------------------------------------------------

    def read_to_end(self, name: str, depth: Optional[int] = None) -> XmlEvent:
        """Consume events up to and including the end of ``name``.

        With ``depth`` omitted, the element that is currently open is used.
        """
        if depth is None:
            depth = self.depth
        while True:
            event = self._require_event(name)
            if event.kind == END and event.depth == depth and event.name == name:
                return event

    def read_text(self, name: str) -> str:
        """Text content of the element whose start was just read."""
        event = self.read_to_end(name)
        return "".join(event.element.itertext())

    def seek_start_callback(
        self,
        name: Optional[str],
        depth: Optional[int],
        callback: Callable[[ET.Element], bool],
    ) -> Optional[XmlEvent]:
        """Advance to the first start event matching name, depth and callback.

        Returns None, leaving the boundary event unread, when the element
        enclosing ``depth`` closes first (or the document ends).
        """
        while True:
            event = self.peek_event()
            if event is None:
                return None
            if depth is not None and event.kind == END and event.depth < depth:
                return None
            self.read_event()
            if (
                event.kind == START
                and (name is None or event.name == name)
                and (depth is None or event.depth == depth)
                and callback(event.element)
            ):
                return event

    def seek_start(self, name: Optional[str] = None, depth: Optional[int] = None) -> Optional[XmlEvent]:
        return self.seek_start_callback(name, depth, lambda element: True)

    def seek_end(self, name: Optional[str] = None, depth: Optional[int] = None) -> Optional[XmlEvent]:
        """Advance past the first end event matching name and depth."""
        while True:
            event = self.peek_event()
            if event is None:
                return None
            if depth is not None and event.kind == END and event.depth < depth:
                return None
            self.read_event()
            if (
                event.kind == END
                and (name is None or event.name == name)
                and (depth is None or event.depth == depth)
            ):
                return event
