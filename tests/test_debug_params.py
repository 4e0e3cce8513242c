from strawshmup.debug_params import DebugParams


def test_default_lines():
    lines = DebugParams().lines(60)
    assert len(lines) == 12
    assert lines[0] == "GAME_TIME(s) = 0.000000"
    assert lines[3] == "LIMIT_FPS = 60"


def test_lines_reflect_values():
    params = DebugParams()
    params.objects = 42
    params.sleep_time = 7
    lines = params.lines(30)
    assert "OBJECTS = 42" in lines
    assert "SLEEP_TIME(ms) = 7" in lines
    assert lines.index("OBJECTS = 42") < lines.index("SLEEP_TIME(ms) = 7")


def test_reset_restores_defaults():
    params = DebugParams()
    params.debug_flag = True
    params.game_time = 12.5
    params.actual_fps = 59
    params.reset()
    assert params == DebugParams()