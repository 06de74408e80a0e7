"""Stream relay — best-effort copy from a child pipe to a destination."""

import threading

from prefix_run import log

CHUNK_SIZE = 64 * 1024


def relay(source, sink, name: str = "") -> int:
    """Copy source to sink until EOF. Returns bytes forwarded.

    Write faults are swallowed; after one, the source is still drained (and
    discarded) so the child never stalls on a full pipe. A read fault ends the
    relay.
    """
    forwarded = 0
    broken = False
    while True:
        try:
            chunk = source.read(CHUNK_SIZE)
        except OSError as e:
            log.debug(f"{name}: read failed: {e}")
            break
        if not chunk:
            break
        if broken:
            continue
        try:
            sink.write(chunk)
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()
        except OSError as e:
            # PrefixWriteError knows how much of the chunk made it out
            forwarded += getattr(e, "consumed", 0)
            log.debug(f"{name}: write failed, discarding remaining output: {e}")
            broken = True
            continue
        forwarded += len(chunk)
    return forwarded


def start_relay(source, sink, name: str) -> threading.Thread:
    """Run relay() on a daemon thread. Caller joins it."""
    thread = threading.Thread(
        target=relay, args=(source, sink, name), name=f"relay-{name}", daemon=True
    )
    thread.start()
    return thread
