"""Status entry renderer."""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

from .constants import (
    ALIAS_DISPLAY_SEPARATOR,
    ANY_METHODS,
    DETAIL_INDENT,
    DIM_STYLE,
    FLAG_DISPLAY_SEPARATOR,
    METHOD_DISPLAY_SEPARATOR,
    STATUS_CLASS_STYLES,
)
from .model import OutputOptions, StatusRecord


def code_style(record: StatusRecord) -> str | None:
    """Map a record to the color of its status class, or None outside 1xx-5xx."""
    return STATUS_CLASS_STYLES.get(record.status_class)


def _methods_label(record: StatusRecord) -> str:
    if record.any_method:
        return ANY_METHODS
    return METHOD_DISPLAY_SEPARATOR.join(record.methods)


def build_entry(record: StatusRecord, options: OutputOptions) -> Text:
    """Build a record as Rich text; styles are attached only when color is enabled."""
    if options.codes_only:
        return Text(record.code_text)
    if options.names_only:
        return Text(record.name)

    dim = DIM_STYLE if options.color_enabled else None
    code_color = code_style(record) if options.color_enabled else None

    entry = Text()
    entry.append(f"{record.code:>3}", style=code_color)
    entry.append(f"  {record.name}")
    if record.flags:
        entry.append(" ")
        entry.append(f"[{FLAG_DISPLAY_SEPARATOR.join(record.flags)}]", style=dim)
    if record.aliases:
        entry.append(" ")
        entry.append(f"(aka: {ALIAS_DISPLAY_SEPARATOR.join(record.aliases)})", style=dim)

    entry.append(f"\n{DETAIL_INDENT}")
    entry.append(f"[{_methods_label(record)}]", style=dim)
    entry.append(f" {record.description}")
    return entry


def to_ansi(text: Text, color_enabled: bool) -> str:
    """Render Rich text to a string, with 8-color ANSI sequences if enabled.

    Rich expands tabs while rendering; table rows never contain them.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=color_enabled,
        color_system="standard" if color_enabled else None,
        no_color=False,
        force_jupyter=False,
        legacy_windows=False,
        highlight=False,
        emoji=False,
        markup=False,
        width=max(len(text.plain), 80),
    )
    console.print(text, soft_wrap=True, end="")
    return buffer.getvalue()


def render_entry(record: StatusRecord, options: OutputOptions) -> str:
    """Render one matched record as a text block without a trailing newline."""
    return to_ansi(build_entry(record, options), options.color_enabled)
