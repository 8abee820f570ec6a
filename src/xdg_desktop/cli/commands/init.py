from __future__ import annotations

from pathlib import Path

import typer

from xdg_desktop.cli.utils.files import ensure_dir, write_file

DEFAULT_CONFIG_TOML = """\
[parser]
# How list values of keys outside the desktop entry key table are typed:
#   "homogeneous"  - all elements boolean, else all numeric, else all strings
#   "element_wise" - each element typed on its own
probe_policy = "homogeneous"
# Store section names as "[Desktop Entry]" instead of "Desktop Entry"
keep_section_brackets = false

[ui]
max_value_width = 80
# show the locale tag of localized keys, e.g. Name[de] -> de
show_locale = false
"""


def init_cmd(
    path: Path = typer.Argument(Path("."), help="Directory to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    """Write a default .xdg-desktop/config.toml."""
    cfg_dir = path.resolve() / ".xdg-desktop"
    ensure_dir(cfg_dir)

    target = cfg_dir / "config.toml"
    if write_file(target, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {target}")
    else:
        typer.echo(f"{target} already exists (use --force to overwrite)")
