from __future__ import annotations

from pathlib import Path

import pytest

HTOP_DESKTOP = """\
[Desktop Entry]
Type=Application
Version=1.0
Name=Htop
GenericName=Process Viewer
GenericName[ca]=Visualitzador de processos
GenericName[sr@Latn]=Pregledač procesa
Comment=Show System Processes
Comment[es_CL]=Mostrar procesos del sistema
Icon=htop
Exec=htop
Terminal=true
Categories=ConsoleOnly;System;
Keywords=system;process;task
X-Priority=10
"""


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # keep the developer's real ~/.config/xdg-desktop out of the tests
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def htop_text() -> str:
    return HTOP_DESKTOP


@pytest.fixture
def htop_file(tmp_path: Path) -> Path:
    p = tmp_path / "apps" / "htop.desktop"
    p.parent.mkdir(parents=True)
    p.write_text(HTOP_DESKTOP, encoding="utf-8")
    return p
