class PuzzleError(RuntimeError):
    """
    Exception for fatal faults while assembling a puzzle: invalid configuration, unreadable tiles, or a failure to save
    the assembled image.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
