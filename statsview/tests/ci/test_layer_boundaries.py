from __future__ import annotations

from pathlib import Path

import pytest


PACKAGE_ROOT = Path(__file__).resolve().parents[2]
PROJECT_ROOT = PACKAGE_ROOT.parent


def iter_python_files(*relative: str) -> list[Path]:
    target = PACKAGE_ROOT.joinpath(*relative)
    if target.is_file():
        return [target]
    return sorted(target.rglob("*.py"))


def find_needle(needle: str, files: list[Path]) -> list[str]:
    matches: list[str] = []
    for file_path in files:
        for line_no, line in enumerate(file_path.read_text(encoding="utf-8").splitlines(), start=1):
            if needle in line:
                rel_path = file_path.relative_to(PROJECT_ROOT)
                matches.append(f"{rel_path}:{line_no}: {line.strip()}")
    return matches


@pytest.mark.parametrize("layer", ["domain", "usecases", "viewmodels", "adapters"])
@pytest.mark.parametrize("needle", ["..app", "statsview.app"])
def test_inner_layers_do_not_import_app(layer: str, needle: str) -> None:
    matches = find_needle(needle, iter_python_files(layer))
    assert not matches, f"'{layer}' must not depend on the app layer:\n" + "\n".join(matches)


@pytest.mark.parametrize(
    "relative",
    [
        ("domain",),
        ("usecases",),
        ("viewmodels",),
        ("app", "view_all_factory.py"),
    ],
)
@pytest.mark.parametrize("needle", ["import logging", "getLogger"])
def test_resolution_and_assembly_do_not_log(relative: tuple[str, ...], needle: str) -> None:
    matches = find_needle(needle, iter_python_files(*relative))
    assert not matches, "Resolution and assembly must not log:\n" + "\n".join(matches)
