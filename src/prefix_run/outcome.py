"""Run outcome + exit code translation."""

from dataclasses import dataclass


@dataclass
class Outcome:
    returncode: int | None = None
    error: str | None = None

    @property
    def signal(self) -> int | None:
        """Signal number that killed the child, if any."""
        if self.returncode is not None and self.returncode < 0:
            return -self.returncode
        return None


def exit_code(outcome: Outcome) -> int:
    """Map an outcome to a shell-style exit code.

    0 or the child's own status on a normal exit, 128+N when killed by
    signal N, 1 when the child never ran.
    """
    if outcome.error is not None or outcome.returncode is None:
        return 1
    if outcome.signal is not None:
        return 128 + outcome.signal
    return outcome.returncode
