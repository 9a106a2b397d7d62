"""Base exceptions for tanglestat domain."""


class TangleStatError(Exception):
    """Root exception for all tanglestat errors.

    All fatal domain exceptions inherit from this.
    Allows: except TangleStatError to catch all library errors.
    """


# N818: Signals are NOT errors — no "Error" suffix per PEP 8.
# Same pattern as stdlib: StopIteration, GeneratorExit, SystemExit.
class TangleStatSignal(Exception):  # noqa: N818
    """Base for all tanglestat signal exceptions (flow control, not errors).

    Signals are recovered inside the library and never reach the caller.
    """
