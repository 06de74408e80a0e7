"""Line-prefix transform — inserts a fixed prefix before every output line."""

NEWLINE = b"\n"


class PrefixWriteError(OSError):
    """Sink write failed; `consumed` input bytes were forwarded before it."""

    def __init__(self, consumed: int, cause: OSError):
        super().__init__(f"write failed after {consumed} bytes: {cause}")
        self.consumed = consumed


class LinePrefixWriter:
    """Wraps a binary sink and prefixes each line written through it.

    State survives across write() calls, so a line split over several chunks
    still gets exactly one prefix. Only the line-start flag is kept; nothing
    is buffered.
    """

    def __init__(self, dst, prefix: bytes):
        self.dst = dst
        self.prefix = bytes(prefix)
        self.at_line_start = True

    def write(self, data: bytes) -> int:
        if not self.prefix:
            self.dst.write(data)
            return len(data)

        consumed = 0
        end = len(data)
        while consumed < end:
            nl = data.find(NEWLINE, consumed)
            stop = end if nl == -1 else nl + 1
            try:
                if self.at_line_start:
                    self.dst.write(self.prefix)
                    self.at_line_start = False
                self.dst.write(data[consumed:stop])
            except OSError as e:
                raise PrefixWriteError(consumed, e) from e
            consumed = stop
            if nl != -1:
                self.at_line_start = True
        return consumed

    def flush(self) -> None:
        flush = getattr(self.dst, "flush", None)
        if flush is not None:
            flush()
