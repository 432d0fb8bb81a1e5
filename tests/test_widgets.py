import io

import pytest

from exercisekit.widgets import Button, Label, Widget, Window, main


def drawn(widget):
    buffer = io.StringIO()
    widget.draw_into(buffer)
    return buffer.getvalue()


def test_label_width_is_longest_line():
    assert Label("a\nabcd\nab").width() == len("abcd")


def test_empty_label_width():
    assert Label("").width() == 0


def test_label_draw_into_writes_text_and_newline():
    assert drawn(Label("hello there")) == "hello there\n"


def test_button_width_adds_padding():
    assert Button("Click me!").width() == Label("Click me!").width() + 8


def test_button_drawing_shape():
    button = Button("Click me!")
    width = button.width()
    lines = drawn(button).splitlines()
    assert len(lines) == 3
    assert lines[0] == "+" + "-" * width + "+"
    assert lines[2] == lines[0]
    middle = lines[1]
    assert middle.startswith("|") and middle.endswith("|")
    content = middle[1:-1]
    assert len(content) == width
    assert content.strip() == "Click me!"
    left = len(content) - len(content.lstrip(" "))
    right = len(content) - len(content.rstrip(" "))
    assert left <= right <= left + 1


def test_window_without_widgets_uses_title_width():
    title = "Some title"
    assert Window(title).width() == len(title) + 4


def test_window_width_follows_widest_widget():
    window = Window("x")
    label = Label("a much longer label text")
    window.add_widget(label)
    window.add_widget(Button("ok"))
    assert window.width() == max(label.width(), Button("ok").width()) + 4


def test_window_lines_have_equal_width():
    window = Window("Demo")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    lines = drawn(window).splitlines()
    assert all(len(line) == window.width() for line in lines)
    assert lines[0] == lines[-1]
    assert lines[2].startswith("+=") and lines[2].endswith("=+")
    assert lines[1].strip("| ") == "Demo"
    assert any("This is a small text GUI demo." in line for line in lines)
    assert any("Click me!" in line for line in lines)


def test_window_line_count():
    window = Window("Demo")
    window.add_widget(Label("one\ntwo"))
    window.add_widget(Button("b"))
    lines = drawn(window).splitlines()
    # three header lines, two label lines, three button lines, one footer
    assert len(lines) == 3 + 2 + 3 + 1


def test_draw_prints_buffer(capsys):
    window = Window("Title")
    window.add_widget(Label("body"))
    window.draw()
    assert capsys.readouterr().out == drawn(window) + "\n"


def test_widget_is_abstract():
    with pytest.raises(TypeError):
        Widget()


def test_main_draws_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Click me!" in out
    assert "This is a small text GUI demo." in out