"""Color & style helpers.

Decisions:
- Only decorative lines (menu, section headers, errors) are styled; task
  lines stay literal so they read the same with or without color.
- click.echo strips the styles when stdout is not a TTY.
"""
from __future__ import annotations
import click


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


HEX_PRIMARY = '#476EAE'
HEX_DONE = '#A7E399'
HEX_ERROR = '#E06C75'

PRIMARY = _hex_to_rgb(HEX_PRIMARY)
DONE = _hex_to_rgb(HEX_DONE)
ERROR = _hex_to_rgb(HEX_ERROR)


def header(text: str) -> str:
    return click.style(text, fg=PRIMARY, bold=True)


def success(text: str) -> str:
    return click.style(text, fg=DONE)


def error(text: str) -> str:
    return click.style(text, fg=ERROR)


__all__ = ['header', 'success', 'error', 'HEX_PRIMARY', 'HEX_DONE', 'HEX_ERROR']
