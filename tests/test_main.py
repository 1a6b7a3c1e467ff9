from pathlib import Path

import pytest

from pispigot.main import build_parser, print_digits, run, verify
from pispigot.profiles import StreamProfile
from pispigot.reference import reference_pi


def test_run_prints_grouped_digits(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["--count", "24"]) == 0
    out = capsys.readouterr().out
    assert out == "3.1415926535 8979323846 26\n"


def test_run_raw_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["--count", "24", "--raw"]) == 0
    assert capsys.readouterr().out == reference_pi(24) + "\n"


def test_run_uses_profile_count(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "profiles.yaml"
    path.write_text("tiny:\n  count: 4\n", encoding="utf-8")

    assert run(["--profiles", str(path), "--profile", "tiny"]) == 0
    assert capsys.readouterr().out == "3.14\n"


def test_run_unknown_profile_exits_with_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["--profile", "missing"])
    assert excinfo.value.code == 2
    assert "missing" in capsys.readouterr().err


def test_negative_count_is_rejected() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--count", "-5"])


def test_run_unknown_log_level_exits_with_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["--count", "4", "--log-level", "loud"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_is_case_insensitive() -> None:
    args = build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_run_verify_succeeds() -> None:
    assert run(["--verify", "--count", "150"]) == 0


def test_verify_detects_mismatch(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pispigot.main.reference_pi", lambda length: "3.15"[:length])
    assert verify(4) is False


def test_print_digits_wraps_lines() -> None:
    class Sink:
        def __init__(self) -> None:
            self.parts = []

        def write(self, text: str) -> None:
            self.parts.append(text)

        def flush(self) -> None:
            pass

    sink = Sink()
    profile = StreamProfile(group_size=4, groups_per_line=2)
    print_digits(profile, 14, out=sink)
    assert "".join(sink.parts) == "3.1415 9265\n  3589\n"
