"""Entry point of the worm game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from flut.app import App, run
from flut.worm.game_page import GamePage


def build_app() -> App:
    """The worm game's window settings and page."""
    return App(
        title="Worm",
        size=(660, 720),
        favicon_file_path="assets/worm/images/favicon.png",
        use_audio=True,
        child=GamePage(),
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="worm", description="Play the worm game.")
    parser.parse_args(argv)
    run(build_app())


if __name__ == "__main__":
    main()