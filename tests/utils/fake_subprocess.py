"""Test helper: fake subprocess runner utilities.

Provides:
- make_completed_process(cmd, returncode=0, stdout='', stderr='') -> CompletedProcess
- FakeSubprocess: callable object mapping command substrings to results

Usage example in tests:

    from tests.utils.fake_subprocess import FakeSubprocess
    from macos_tweaks.utils import shell

    fake = FakeSubprocess()
    fake.when("brew list").then_stdout("git\\nwget\\n")
    shell.set_runner(fake)

Matching is a plain substring test against the joined command list; every
call is recorded in ``calls`` as ``(cmd, kwargs)``.
"""
from __future__ import annotations

import subprocess
from typing import Callable, List, Tuple


def make_completed_process(cmd, returncode: int = 0, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


class FakeSubprocess:
    def __init__(self):
        self._rules: List[Tuple[str, Callable[[], subprocess.CompletedProcess]]] = []
        self.calls: List[tuple] = []

    def when(self, cmd_substring: str):
        class _Then:
            def __init__(self, parent: FakeSubprocess, substr: str):
                self.parent = parent
                self.substr = substr

            def then_stdout(self, stdout: str, returncode: int = 0, stderr: str = ""):
                def factory():
                    return make_completed_process(self.substr, returncode=returncode, stdout=stdout, stderr=stderr)

                self.parent._rules.append((self.substr, factory))
                return self.parent

            def then_raise(self, exc: BaseException):
                def factory():
                    raise exc

                self.parent._rules.append((self.substr, factory))
                return self.parent

        return _Then(self, cmd_substring)

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        joined = " ".join(cmd) if isinstance(cmd, (list, tuple)) else str(cmd)
        for substr, factory in self._rules:
            if substr in joined:
                return factory()
        return make_completed_process(cmd, 0, stdout="", stderr="")
