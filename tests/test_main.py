import pytest

from flut.worm.game_page import GamePage
from flut.worm.main import build_app, main


def test_build_app_settings():
    app = build_app()
    assert app.title == "Worm"
    assert app.size == (660, 720)
    assert app.favicon_file_path == "assets/worm/images/favicon.png"
    assert app.use_audio is True


def test_build_app_starts_with_fresh_game():
    app = build_app()
    assert isinstance(app.child, GamePage)
    assert app.child.is_worm_dead is False
    assert len(app.child.worm) == 1


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2