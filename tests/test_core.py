from lightyears.core import log


def test_log_formats_arguments(capsys):
    log("cleaning texture : %s", "ship.png")
    assert capsys.readouterr().out == "cleaning texture : ship.png\n"


def test_log_without_arguments_prints_message_verbatim(capsys):
    log("Actor destroy")
    assert capsys.readouterr().out == "Actor destroy\n"


def test_log_without_arguments_keeps_percent_signs(capsys):
    log("100% done")
    assert capsys.readouterr().out == "100% done\n"


def test_log_multiple_arguments(capsys):
    log("%s=%d", "frames", 60)
    assert capsys.readouterr().out == "frames=60\n"


def test_log_mismatched_arguments_raise():
    import pytest

    with pytest.raises(TypeError):
        log("%d", "not a number")