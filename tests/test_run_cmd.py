import subprocess
import sys

import pytest

from depinsight.core.util import run_cmd


def test_returns_stdout(tmp_path):
    assert run_cmd([sys.executable, "-c", "print('hi')"], cwd=tmp_path).strip() == "hi"


def test_non_zero_exit_raises_with_stderr(tmp_path):
    cmd = [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"]

    with pytest.raises(subprocess.CalledProcessError) as exc:
        run_cmd(cmd, cwd=tmp_path)
    assert exc.value.returncode == 3
    assert exc.value.stderr == "bad"


def test_accepted_exit_code_returns_output(tmp_path):
    cmd = [sys.executable, "-c", "import sys; print('{}'); sys.exit(3)"]
    assert run_cmd(cmd, cwd=tmp_path, accept_codes=(0, 3)).strip() == "{}"


def test_missing_executable(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_cmd(["definitely-not-a-real-tool-xyz"], cwd=tmp_path)


def test_require_output_rejects_silent_failure(tmp_path):
    cmd = [sys.executable, "-c", "import sys; sys.stderr.write('Command not found: x'); sys.exit(1)"]

    with pytest.raises(subprocess.CalledProcessError) as exc:
        run_cmd(cmd, cwd=tmp_path, accept_codes=(0, 1), require_output=True)
    assert exc.value.returncode == 1
    assert "Command not found" in exc.value.stderr


def test_require_output_keeps_report_on_soft_failure(tmp_path):
    cmd = [sys.executable, "-c", "import sys; print('{\"unused_deps\": []}'); sys.exit(3)"]
    out = run_cmd(cmd, cwd=tmp_path, accept_codes=(0, 3), require_output=True)
    assert out.strip() == '{"unused_deps": []}'
