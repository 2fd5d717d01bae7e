import time


class Timer:
    """
    Stopwatch for measuring the duration of the phases of assembling a puzzle.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self):
        """
        Object constructor. Starts the timer.
        """
        self._start: float = time.perf_counter()
        """
        The moment the timer has been started.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def reset(self) -> None:
        """
        Restarts this timer.
        """
        self._start = time.perf_counter()

    # ------------------------------------------------------------------------------------------------------------------
    def elapsed_ms(self) -> float:
        """
        Returns the elapsed time in milliseconds since this timer has been started.
        """
        return 1000.0 * (time.perf_counter() - self._start)

# ----------------------------------------------------------------------------------------------------------------------
