"""Tests for the replay entry point."""
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from bufswitch.config import Config
from bufswitch.host import MemoryHost
from bufswitch.main import ScriptError, main, run_script
from bufswitch.switcher import Switcher

SCRIPT = """\
# two windows, five buffers
window w1
window mini minibuffer
buffer A
buffer B
buffer  temp
buffer C
buffer *scratch*
show w1 A
show w1 B
next
next
done
history w1
"""


def make(width=80):
    config = Config(os.path.join(os.path.dirname(__file__), "no-such-dir", "config.json"))
    config._data["highlight"] = "none"
    host = MemoryHost(width=width)
    switcher = Switcher(host, config)
    host.on_display = switcher.buffer_displayed
    return host, switcher


def test_replay_prints_status_and_history():
    host, switcher = make()
    out = io.StringIO()
    run_script(io.StringIO(SCRIPT), switcher, host, out)
    lines = out.getvalue().splitlines()
    assert lines == [
        "B A C *scratch*",
        "B A C *scratch*",
        "history w1: C B A",
    ]


def test_filter_directives():
    host, switcher = make()
    out = io.StringIO()
    script = "window w1\nbuffer readme.txt\nbuffer main.py\nshow w1 main.py\n" \
             "filter\ntype re\nbackspace\ncancel\n"
    run_script(io.StringIO(script), switcher, host, out)
    lines = out.getvalue().splitlines()
    assert lines == [
        ": main.py readme.txt",
        "r: readme.txt",
        "re: readme.txt",
        "r: readme.txt",
    ]
    assert host.displayed_buffer(host.find_window("w1")).name == "main.py"


def test_unknown_directive():
    host, switcher = make()
    with pytest.raises(ScriptError):
        run_script(io.StringIO("frobnicate\n"), switcher, host, io.StringIO())


def test_main_exits_on_bad_script(tmp_path):
    script = tmp_path / "bad.txt"
    script.write_text("show nowhere nothing\n")
    with pytest.raises(SystemExit) as exc:
        main([str(script), "--config", str(tmp_path / "config.json")])
    assert exc.value.code == 2


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "ok.txt"
    script.write_text("window w1\nbuffer a\nbuffer b\nshow w1 a\nnext\n")
    config = tmp_path / "config.json"
    config.write_text('{"highlight": "none"}')
    main([str(script), "--config", str(config), "--width", "30"])
    assert capsys.readouterr().out.splitlines() == ["a b"]
