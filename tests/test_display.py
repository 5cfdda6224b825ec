from medibox.display import Canvas, Screen, TextItem, climate_lines
from medibox.sensors import ClimateStatus, Level, check_climate


def test_canvas_records_and_clears():
    canvas = Canvas()
    canvas.draw_text("one", 0, 0)
    canvas.draw_text("two", 5, 10, 2, True)
    assert canvas.text() == "one\ntwo"
    assert canvas.items[1] == TextItem("two", 5, 10, 2, True)
    canvas.clear()
    assert canvas.items == []
    assert canvas.text() == ""


def test_climate_lines_labels():
    status = ClimateStatus(33.0, 50.0, Level.HIGH, Level.LOW)
    assert climate_lines(status) == ("Temp high: 33.0", "Humidity low: 50.0")


def test_climate_lines_normal_rounding():
    status = check_climate(28.26, 70.04)
    temp_line, humidity_line = climate_lines(status)
    assert temp_line.startswith("Temp normal: ")
    assert humidity_line == "Humidity normal: 70.0"


def test_print_line_offsets_and_selection():
    canvas = Canvas()
    screen = Screen(canvas)
    screen.print_line("Menu", 0, 15, 1, selected=True)
    assert canvas.items == [TextItem("Menu", 1, 16, 1, True)]


def test_print_line_with_climate_adds_two_lines():
    canvas = Canvas()
    screen = Screen(canvas)
    status = ClimateStatus(20.0, 90.0, Level.LOW, Level.HIGH)
    screen.print_line("12:00", 0, 0, 2, climate=status)
    assert [item.row for item in canvas.items] == [1, 40, 50]
    assert canvas.items[1].text == "Temp low: 20.0"
    assert canvas.items[2].text == "Humidity high: 90.0"
    assert not canvas.items[0].inverted