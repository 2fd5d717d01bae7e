from tile_puzzle.application.TilePuzzleApplication import TilePuzzleApplication


# ----------------------------------------------------------------------------------------------------------------------
def main() -> int:
    """
    Runs the TilePuzzle application.
    """
    application = TilePuzzleApplication()

    return application.run()


# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    raise SystemExit(main())
