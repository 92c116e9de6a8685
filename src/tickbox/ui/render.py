"""Turn a snapshot into Rich renderables."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel

from tickbox.config import PromptConfig
from tickbox.models import Choice, Item, Separator, Snapshot, Status
from tickbox.ui.panel_builder import Page, format_scroll_indicator

POINTER = "❯"
CHECKED_ICON = "[green]◉[/green]"
UNCHECKED_ICON = "◯"
DISABLED_ICON = "[dim]-[/dim]"
DEFAULT_PANEL_WIDTH = 80


def default_help_tip(config: PromptConfig) -> str:
    """Key hints, leaving out disabled shortcuts."""
    parts = ["<space> to select"]
    if config.shortcuts.all:
        parts.append(f"<{config.shortcuts.all}> to toggle all")
    if config.shortcuts.invert:
        parts.append(f"<{config.shortcuts.invert}> to invert selection")
    parts.append("and <enter> to proceed")
    return "(Press " + ", ".join(parts) + ")"


def help_tip(snapshot: Snapshot, config: PromptConfig) -> str | None:
    if not snapshot.help_tip_visible or not config.show_help:
        return None
    if isinstance(config.instructions, str):
        return config.instructions
    return default_help_tip(config)


def render_item(item: Item, is_active: bool) -> str:
    """Render one row as Rich markup."""
    if isinstance(item, Separator):
        return f"  [dim]{escape(item.label)}[/dim]"

    label = escape(item.label)
    if item.disabled:
        reason = item.disabled if isinstance(item.disabled, str) else "disabled"
        return f"  {DISABLED_ICON} [dim]{label} ({escape(reason)})[/dim]"

    icon = CHECKED_ICON if item.checked else UNCHECKED_ICON
    if is_active:
        return f"[cyan]{POINTER}[/cyan]{icon} [cyan]{label}[/cyan]"
    return f" {icon} {label}"


def render_answer(snapshot: Snapshot, config: PromptConfig) -> str:
    """Final line shown once the prompt is done."""
    names = ", ".join(escape(choice.short_label) for choice in snapshot.selection)
    return f"[green]✔[/green] [bold]{escape(config.message)}[/bold] [cyan]{names}[/cyan]"


def render_lines(snapshot: Snapshot, config: PromptConfig, page: Page) -> list[str]:
    """Body lines for a pending prompt: rows, description, status."""
    lines: list[str] = []

    tip = help_tip(snapshot, config)
    if tip:
        lines.append(f"[dim]{escape(tip)}[/dim]")

    above, below = format_scroll_indicator(page.hidden_above, page.hidden_below)
    if above:
        lines.append(above)
    for index in page.indices:
        lines.append(render_item(snapshot.items[index], index == snapshot.active))
    if below:
        lines.append(below)

    active = snapshot.active_item
    if isinstance(active, Choice) and active.description:
        lines.append("")
        lines.append(f"[cyan]{escape(active.description)}[/cyan]")

    if snapshot.validating:
        lines.append("")
        lines.append("[dim]Validating...[/dim]")
    elif snapshot.error_message:
        lines.append("")
        lines.append(f"[red]> {escape(snapshot.error_message)}[/red]")

    return lines


def render(snapshot: Snapshot, config: PromptConfig, page: Page, width: int = DEFAULT_PANEL_WIDTH):
    """Build the frame for ``snapshot``: a panel while pending, one line when done."""
    if snapshot.status is Status.DONE:
        return render_answer(snapshot, config)

    return Panel(
        "\n".join(render_lines(snapshot, config, page)),
        title=f"[bold]{escape(config.message)}[/bold]" if config.message else None,
        title_align="left",
        border_style="blue",
        width=width,
    )
