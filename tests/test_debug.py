from liwengine.debug import Debug, DebugPrintTask, ErrorPrintTask
from liwengine.output import TextOutputDevice


class RecordingOutput(TextOutputDevice):
    def __init__(self):
        super().__init__()
        self.written = []

    def print(self, text):
        self.written.append(text)

    def print_line(self, text):
        self.written.append(text + "\n")


def make_debug():
    output = RecordingOutput()
    return Debug(output), output


def test_print_passes_text_through():
    debug, output = make_debug()
    debug.print("abc")
    assert output.written == ["abc"]


def test_print_line_passes_text_through():
    debug, output = make_debug()
    debug.print_line("abc")
    assert output.written == ["abc\n"]


def test_debug_print_prefixes_line():
    debug, output = make_debug()
    debug.debug_print("loaded")
    assert output.written == ["[DEBUG INFO]loaded\n"]


def test_error_print_prefixes_line():
    debug, output = make_debug()
    debug.error_print("failed")
    assert output.written == ["[ERROR INFO]failed\n"]


def test_debug_print_task_executes():
    debug, output = make_debug()
    task = DebugPrintTask(debug, "frame")
    task.execute()
    assert output.written == ["[DEBUG INFO]frame\n"]


def test_error_print_task_executes():
    debug, output = make_debug()
    task = ErrorPrintTask(debug, "frame")
    task.execute()
    task.execute()
    assert output.written == ["[ERROR INFO]frame\n", "[ERROR INFO]frame\n"]