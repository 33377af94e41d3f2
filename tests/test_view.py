import pytest

from lifeprogress.model.layout import DisplayMode


@pytest.fixture
def canvas(qapp, life):
    from lifeprogress.view.widgets.life_canvas import LifeCanvas

    widget = LifeCanvas(life)
    widget.resize(540, 900)
    yield widget
    widget.deleteLater()


def test_container_width_keeps_grid_inside_widget(canvas):
    width = canvas.container_width()
    assert 0 < width <= canvas.width() - 2 * canvas.MARGIN
    assert canvas.controller.content_height(width) <= canvas.height() - 2 * canvas.MARGIN + 1e-6


def test_toggle_emits_mode_and_starts_frame_clock(canvas):
    received = []
    canvas.mode_changed.connect(received.append)

    canvas.toggle_mode()

    assert canvas.display_mode() is DisplayMode.CURRENT_YEAR
    assert received == ["currentYear"]
    assert canvas.is_animating()


def test_setting_same_mode_does_nothing(canvas):
    received = []
    canvas.mode_changed.connect(received.append)

    canvas.set_mode(DisplayMode.LIFE)

    assert received == []
    assert not canvas.is_animating()


def test_canvas_paints_in_both_modes(canvas):
    image = canvas.grab().toImage()
    assert not image.isNull()
    assert image.width() == 540

    canvas.set_mode(DisplayMode.CURRENT_YEAR)
    assert not canvas.grab().toImage().isNull()


def test_main_window_title_follows_mode(qapp, life):
    from lifeprogress.view.main_window import MainWindow

    window = MainWindow(life)
    assert window.windowTitle().endswith("Your life")

    window.act_toggle.trigger()

    assert window.canvas.display_mode() is DisplayMode.CURRENT_YEAR
    assert window.windowTitle().endswith("This year")
    assert "Year 30 of 90" in window.lbl_summary.text()
    window.deleteLater()
