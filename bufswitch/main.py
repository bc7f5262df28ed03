"""Entry point for bufswitch.

Replays a script of editor events against an in-memory host and prints
every status line the switcher produces.

Usage:
    bufswitch session.txt
    bufswitch --width 40 -          # read the script from stdin
"""
import sys
import logging
import argparse

from bufswitch.config import Config
from bufswitch.host import MemoryHost
from bufswitch.switcher import Switcher

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """Malformed replay script line."""


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _lookup(finder, name, kind):
    found = finder(name)
    if found is None:
        raise ScriptError(f"unknown {kind} {name!r}")
    return found


def run_script(lines, switcher: Switcher, host: MemoryHost, out=None):
    """Execute replay directives one line at a time."""
    out = out if out is not None else sys.stdout
    printed = len(host.status_lines)

    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip("\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        directive = line.split(None, 1)[0]
        # Everything after the directive and one space, verbatim
        arg = line.lstrip()[len(directive) + 1:]
        args = arg.split()

        try:
            if directive == "window":
                if not args:
                    raise ScriptError("window needs a name")
                flags = set(args[1:])
                host.add_window(args[0],
                                is_minibuffer="minibuffer" in flags,
                                strongly_dedicated="dedicated" in flags)
            elif directive == "buffer":
                host.add_buffer(arg)
            elif directive == "kill":
                host.kill_buffer(_lookup(host.find_buffer, arg, "buffer"))
            elif directive == "show":
                if len(args) < 2:
                    raise ScriptError("show needs a window and a buffer")
                window = _lookup(host.find_window, args[0], "window")
                buffer = _lookup(host.find_buffer, arg.split(" ", 1)[1], "buffer")
                host.set_displayed_buffer(window, buffer)
            elif directive == "select":
                host.select_window(_lookup(host.find_window, arg.strip(), "window"))
            elif directive == "close":
                window = _lookup(host.find_window, arg.strip(), "window")
                host.close_window(window)
                switcher.window_closed(window)
            elif directive == "next":
                switcher.next()
            elif directive == "previous":
                switcher.previous()
            elif directive == "filter":
                switcher.activate_filter()
            elif directive == "type":
                for char in arg:
                    switcher.extend_filter(char)
            elif directive == "backspace":
                switcher.delete_last_filter_char()
            elif directive == "done":
                switcher.finalize()
            elif directive == "cancel":
                switcher.cancel()
            elif directive == "other":
                switcher.other_command(arg.strip())
            elif directive == "history":
                window = _lookup(host.find_window, arg.strip(), "window")
                names = " ".join(b.name for b in switcher.history.stack(window))
                print(f"history {window.name}: {names}", file=out)
            else:
                raise ScriptError(f"unknown directive {directive!r}")
        except ScriptError as e:
            raise ScriptError(f"line {lineno}: {e}") from None

        for status in host.status_lines[printed:]:
            if status:
                print(status, file=out)
        printed = len(host.status_lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="bufswitch event replay")
    parser.add_argument("script", help="Script file, or - for stdin")
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--width", type=int, default=None,
                        help="Status line width (default: from config)")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    config = Config(args.config) if args.config else Config()
    setup_logging(args.debug or config.debug_logging)

    host = MemoryHost(width=args.width)
    switcher = Switcher(host, config)
    host.on_display = switcher.buffer_displayed

    try:
        if args.script == "-":
            run_script(sys.stdin, switcher, host)
        else:
            with open(args.script, "r") as f:
                run_script(f, switcher, host)
    except ScriptError as e:
        logger.error("%s", e)
        sys.exit(2)


if __name__ == "__main__":
    main()
