"""Shared fixtures: fake gcc-like compilers."""

import os
import sys
import textwrap

import pytest


GCC_STDERR = (
    "Using built-in specs.\n"
    "#include \"...\" search starts here:\n"
    "#include <...> search starts here:\n"
    " /usr/lib/gcc/x86_64-linux-gnu/13/include\n"
    " /usr/local/include\n"
    " /usr/include\n"
    "End of search list.\n"
)


def _write_script(path, body):
    path.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body))
    path.chmod(0o755)
    return str(path)


@pytest.fixture
def fake_compiler(tmp_path):
    """Executable that prints a gcc search list on stderr and exits nonzero."""
    if os.name != "posix":
        pytest.skip("shebang scripts need a POSIX platform")
    return _write_script(tmp_path / "fake-c++", f"""
        import sys
        data = sys.stdin.read()
        sys.stdout.write("args=" + " ".join(sys.argv[1:]) + "\\n")
        sys.stdout.write("stdin=" + str(len(data)) + "\\n")
        sys.stderr.write({GCC_STDERR!r})
        sys.exit(1)
    """)


@pytest.fixture
def silent_compiler(tmp_path):
    """Executable that runs fine but prints no search list."""
    if os.name != "posix":
        pytest.skip("shebang scripts need a POSIX platform")
    return _write_script(tmp_path / "silent-c++", """
        import sys
        sys.stderr.write("clang: error: unsupported option '-x c++'\\n")
    """)
