"""Interactive console front end for the generation service."""

from __future__ import annotations

import argparse
import json
import queue
import shlex
import sys
from typing import Callable, TextIO

from .controller import ClientController
from .fields import FieldType
from .network import NetworkWorker

_HELP = """\
Commands:
  table NAME             set the table name
  rows N                 set the number of rows
  output PATH            set the suggested output file
  add                    add a field
  remove N               remove field in row N
  name N NAME            set the name of field N
  type N TYPE            set the type of field N ({types})
  param N KEY VALUE      set a parameter of field N
  show                   print the request body
  send                   send the request
  cancel                 cancel the running request
  wait                   wait for the running request to finish
  help                   show this help
  quit                   leave""".format(types=", ".join(t.value for t in FieldType))


class ClientWindow(ClientController):
    """Line-oriented front end: commands on input, messages on output."""

    def __init__(
        self,
        url: str = ClientController.DEFAULT_URL,
        worker: object = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._events: queue.Queue[tuple[Callable[..., None], tuple[object, ...]]] = (
            queue.Queue()
        )
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        super().__init__(worker=worker, url=url)

    def _post(self, callback: Callable[..., None], *args: object) -> None:
        self._events.put((callback, args))

    def _drain(self, block: bool = False) -> None:
        while block and self.processing:
            callback, args = self._events.get()
            callback(*args)
        while True:
            try:
                callback, args = self._events.get_nowait()
            except queue.Empty:
                return
            callback(*args)

    def _write(self, text: str) -> None:
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def get_save_file_name(self, caption: str, directory: str, file_filter: str) -> str:
        self._stdout.write(f"{caption} [{directory}] ({file_filter}): ")
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            return ""
        return line.strip() or directory

    def show_warning(self, title: str, text: str) -> None:
        super().show_warning(title, text)
        self._write(f"[warning] {title}: {text}")

    def show_critical(self, title: str, text: str) -> None:
        super().show_critical(title, text)
        self._write(f"[critical] {title}: {text}")

    def show_information(self, title: str, text: str) -> None:
        super().show_information(title, text)
        self._write(f"[information] {title}: {text}")

    def _row(self, text: str) -> int:
        index = int(text) - 1
        if not 0 <= index < len(self.fields):
            raise ValueError(f"no field in row {text}")
        return index

    @staticmethod
    def _expect(args: list[str], count: int, usage: str) -> None:
        if len(args) != count:
            raise ValueError(f"usage: {usage}")

    def _handle(self, command: str, args: list[str]) -> None:
        if command == "help":
            self._write(_HELP)
        elif command == "table":
            self.request.table_name = " ".join(args)
        elif command == "rows":
            self._expect(args, 1, "rows N")
            self.request.rows = int(args[0])
        elif command == "output":
            self._expect(args, 1, "output PATH")
            self.request.output_file = args[0]
        elif command == "add":
            self.add_field()
            self._write(f"field {len(self.fields)} added")
        elif command == "remove":
            self._expect(args, 1, "remove N")
            self.remove_field(self._row(args[0]))
        elif command == "name":
            self._expect(args, 2, "name N NAME")
            self.fields[self._row(args[0])].name = args[1]
        elif command == "type":
            self._expect(args, 2, "type N TYPE")
            self.set_field_type(self._row(args[0]), args[1])
        elif command == "param":
            self._expect(args, 3, "param N KEY VALUE")
            field = self.fields[self._row(args[0])]
            if args[1] not in field.params:
                raise ValueError(f"a {field.type.value} field has no parameter {args[1]!r}")
            field.params[args[1]] = int(args[2])
        elif command == "show":
            self._write(json.dumps(self.create_json_body(), indent=4))
        elif command == "send":
            if self.processing:
                raise ValueError("a request is already running")
            if self.send_request():
                self._write(self.send_button_text)
        elif command == "cancel":
            if not self.processing:
                raise ValueError("no request is running")
            self.cancel_request()
        elif command == "wait":
            self._drain(block=True)
        else:
            raise ValueError(f"unknown command {command!r}; type help")

    def run(self) -> int:
        """Read commands until quit or end of input; return the exit status."""
        try:
            while True:
                self._drain()
                self._stdout.write("> ")
                self._stdout.flush()
                line = self._stdin.readline()
                if not line:
                    break
                try:
                    words = shlex.split(line)
                except ValueError as exc:
                    self._write(f"error: {exc}")
                    continue
                if not words:
                    continue
                command, args = words[0].lower(), words[1:]
                if command in ("quit", "exit"):
                    break
                try:
                    self._handle(command, args)
                except (ValueError, IndexError) as exc:
                    self._write(f"error: {exc}")
        finally:
            self.close()
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="datagen-client",
        description="Describe a table and ask the generation service for CSV data.",
    )
    parser.add_argument("--url", default=ClientController.DEFAULT_URL, help="service endpoint")
    parser.add_argument("--timeout", type=float, default=None, help="socket timeout in seconds")
    args = parser.parse_args(argv)
    window = ClientWindow(url=args.url, worker=NetworkWorker(timeout=args.timeout))
    return window.run()