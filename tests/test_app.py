import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from coursekit.breakout.app import main  # noqa: E402


def test_help_names_the_game(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "Brick Breaker" in capsys.readouterr().out


def test_unknown_option_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2
    assert "--no-such-option" in capsys.readouterr().err