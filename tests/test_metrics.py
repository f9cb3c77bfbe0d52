from boggle_solver.metrics import StageTimer


def test_stages_recorded_in_order():
    timer = StageTimer()
    with timer.stage("load"):
        pass
    with timer.stage("solve"):
        pass
    assert list(timer.timings) == ["load", "solve"]
    assert list(timer.summary()) == ["load", "solve", "total"]
    assert timer.summary()["total"] >= timer.timings["load"]


def test_repeated_stage_accumulates():
    timer = StageTimer()
    for _ in range(3):
        with timer.stage("solve"):
            pass
    assert list(timer.timings) == ["solve"]


def test_stage_recorded_when_body_raises():
    timer = StageTimer()
    try:
        with timer.stage("solve"):
            raise ValueError("bad board")
    except ValueError:
        pass
    assert "solve" in timer.timings


def test_report_format():
    timer = StageTimer()
    timer.timings = {"load": 1.3, "solve": 0.4}
    parts = timer.report().split()
    assert parts[:2] == ["load=1.3ms", "solve=0.4ms"]
    assert parts[2].startswith("total=") and parts[2].endswith("ms")
