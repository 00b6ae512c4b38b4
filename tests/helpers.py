"""
Shared fakes for netdiag tests.

Import these in test files: from helpers import FakeProcess, FakeRunner, ...
"""
import io
import os
import threading

from models.command import CommandSuccess


def encode_lines(lines):
    return b"".join(line.encode("utf-8") + b"\n" for line in lines)


class FakeProcess:
    """Stands in for subprocess.Popen; stdout is a finished byte stream."""

    def __init__(self, lines=(), stdout=None, terminate_error=None):
        self.stdout = stdout if stdout is not None else io.BytesIO(encode_lines(lines))
        self.terminate_calls = 0
        self.wait_calls = 0
        self._terminate_error = terminate_error

    def terminate(self):
        self.terminate_calls += 1
        if self._terminate_error is not None:
            raise self._terminate_error

    def wait(self, timeout=None):
        self.wait_calls += 1
        return 0


class PipeProcess(FakeProcess):
    """Process whose output stays open (and silent) until terminated."""

    def __init__(self):
        read_fd, self._write_fd = os.pipe()
        super().__init__(stdout=os.fdopen(read_fd, "rb"))
        self._closed = False
        self._lock = threading.Lock()

    def write_line(self, line):
        with self._lock:
            if self._closed:
                raise OSError("writer closed")
            os.write(self._write_fd, line.encode("utf-8") + b"\n")

    def terminate(self):
        super().terminate()
        self.close_writer()

    def close_writer(self):
        with self._lock:
            if not self._closed:
                self._closed = True
                os.close(self._write_fd)


class BrokenStream:
    """Yields some lines, then fails like a dying pipe."""

    def __init__(self, lines):
        self._lines = lines

    def __iter__(self):
        for line in self._lines:
            yield line.encode("utf-8") + b"\n"
        raise OSError("Input/output error")

    def close(self):
        pass


class RecordingPopen:
    def __init__(self, process):
        self.process = process
        self.commands = []

    def __call__(self, cmd, **kwargs):
        self.commands.append(list(cmd))
        return self.process


class FakeRunner:
    """CommandRunner replacement returning canned results per program/url."""

    def __init__(self, results=None, default=None):
        self.results = results or {}
        self.default = default or CommandSuccess(stdout=b"HTTP/1.1 200 OK\r\n")
        self.calls = []
        self._lock = threading.Lock()

    def run(self, program, args=()):
        with self._lock:
            self.calls.append((program, list(args)))
        key = args[-1] if args else program
        return self.results.get(key, self.default)


class DrainedStream:
    """Finite output that signals once every line has been handed over."""

    def __init__(self, lines):
        self._lines = lines
        self.drained = threading.Event()

    def __iter__(self):
        for line in self._lines:
            yield line.encode("utf-8") + b"\n"
        # Resumed only after the consumer finished with the last line
        self.drained.set()

    def close(self):
        pass
