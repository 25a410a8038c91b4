"""Tests for the drawing session controller and the recognition log."""

import pytest

from gesture_recognizer.app.session import GestureSession
from gesture_recognizer.config.settings import AppConfig
from gesture_recognizer.gestures.dollar_recognizer import DollarRecognizer
from gesture_recognizer.storage.gesture_store import GestureStore
from gesture_recognizer.utils.logger import GestureLogger


@pytest.fixture
def session(tmp_path):
    return GestureSession(recognizer=DollarRecognizer(),
                          store=GestureStore(str(tmp_path / "res")))


def draw(session, points):
    session.begin_stroke(points[0])
    for point in points[1:]:
        session.extend_stroke(point)
    return session.end_stroke()


def test_no_templates_skips_recognition(session):
    assert draw(session, [(0, 0), (50, 0), (100, 0)]) is None
    assert session.status_text == "Match: "


def test_add_template_and_recognize(session):
    draw(session, [(0, 0), (50, 0), (100, 0)])
    assert session.add_template("line")

    result = draw(session, [(10, 10), (60, 12), (110, 10)])
    assert result.name == "line"
    assert session.status_text.startswith("Match: line Confidence: ")
    assert session.recognizer.templates[0].last_score == result.score


def test_added_template_replaces_match_line(session):
    session.load_defaults()
    draw(session, [(0, 0), (100, 0)])
    assert session.status_text.startswith("Match: line")

    assert session.add_template("flat")
    assert session.status_text == "Added template 'flat'"

    draw(session, [(0, 0), (100, 0)])
    assert session.status_text.startswith("Match: ")


def test_blank_template_name(session):
    draw(session, [(0, 0), (100, 0)])
    session.add_template("  ")
    assert session.recognizer.names() == [AppConfig.DEFAULT_TEMPLATE_NAME]


def test_click_without_drag(session):
    draw(session, [(0, 0), (100, 0)])
    session.add_template("line")

    assert draw(session, [(5, 5)]) is None
    assert session.result is None
    assert session.status_text


def test_add_degenerate_template(session):
    draw(session, [(5, 5)])
    assert not session.add_template("dot")
    assert "Cannot add 'dot'" in session.message
    assert session.recognizer.is_empty()


def test_extend_without_begin(session):
    session.extend_stroke((1, 1))
    assert session.path == []


def test_save_and_load(session):
    draw(session, [(0, 0), (40, 30), (80, 0)])
    assert session.save_current("")
    assert session.message == "Saved gesture"
    assert session.store.list_gestures() == [AppConfig.DEFAULT_GESTURE_NAME]

    assert session.load_named("gesture")
    assert session.recognizer.names() == ["gesture"]


def test_save_empty_stroke(session):
    assert not session.save_current("x")


def test_load_missing(session):
    assert not session.load_named("missing")
    assert "missing" in session.message


def test_low_confidence_label(tmp_path):
    class StrictConfig(AppConfig):
        CONFIDENCE_THRESHOLD = 1.01

    session = GestureSession(store=GestureStore(str(tmp_path)), config=StrictConfig)
    draw(session, [(0, 0), (100, 0)])
    session.add_template("line")
    draw(session, [(0, 0), (50, 3), (100, 0)])
    assert "(low confidence)" in session.status_text


def test_load_defaults(session):
    assert session.load_defaults() > 0
    draw(session, [(0, 0), (100, 0)])
    assert session.result.name == "line"


def test_clear(session):
    session.load_defaults()
    draw(session, [(0, 0), (100, 0)])
    session.clear()
    assert session.path == []
    assert session.result is None


def test_logger_writes_debug_file(tmp_path):
    debug_file = tmp_path / "debug.log"
    gesture_logger = GestureLogger(str(debug_file))
    session = GestureSession(store=GestureStore(str(tmp_path)), gesture_logger=gesture_logger)

    draw(session, [(0, 0), (100, 0)])
    session.add_template("line")
    draw(session, [(0, 0), (90, 4)])
    draw(session, [(1, 1)])
    session.close()

    content = debug_file.read_text(encoding='utf-8')
    assert "TEMPLATE ADDED: 'line'" in content
    assert "RECOGNIZED: 'line'" in content
    assert "REJECTED" in content
    assert gesture_logger.debug_file is None


def test_logger_without_file():
    gesture_logger = GestureLogger()
    gesture_logger.log_template_added("line", 2)
    gesture_logger.close()
