import subprocess
from pathlib import Path
from typing import Iterable, Sequence


def run_cmd(
    cmd: Sequence[str],
    cwd: Path,
    accept_codes: Iterable[int] = (0,),
    require_output: bool = False,
) -> str:
    """Run ``cmd`` in ``cwd`` and return its stdout.

    Exit codes outside ``accept_codes`` raise ``CalledProcessError`` with the
    captured output attached. With ``require_output``, an accepted non-zero
    exit that printed nothing raises too: the tool never produced its report.
    A missing executable raises ``FileNotFoundError``.
    """
    p = subprocess.run(
        list(cmd),
        cwd=str(cwd),
        capture_output=True,
        text=True,
    )
    failed = p.returncode not in tuple(accept_codes)
    if require_output and p.returncode != 0 and not (p.stdout or "").strip():
        failed = True
    if failed:
        raise subprocess.CalledProcessError(p.returncode, list(cmd), output=p.stdout, stderr=p.stderr)
    return p.stdout or ""
