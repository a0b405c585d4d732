import argparse

__all__ = ["cli"]

cli = argparse.ArgumentParser(
    description="Replay recorded games through the Elo ratings",
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
