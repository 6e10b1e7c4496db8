"""Terminal rendering of API responses."""

import json
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from rich.console import Console
from rich.markup import escape

CAPTION_LIMIT = 300
SEPARATOR = "─" * 37

MEDIA_TYPES = {1: "Photo", 2: "Video", 8: "Album"}


@dataclass
class OutputContext:
    """Consoles for results (stdout) and status messages (stderr)."""

    out: Console
    status: Console
    color: bool = True

    @classmethod
    def create(cls, quiet: bool = False, environ: Optional[Mapping[str, str]] = None) -> "OutputContext":
        """
        Build the output context once per run.

        Color is off when ``quiet`` is set or the terminal is unset or dumb.
        """
        environ = os.environ if environ is None else environ
        term = environ.get("TERM", "")
        color = not quiet and term not in ("", "dumb")
        color_system = "auto" if color else None
        return cls(
            out=Console(color_system=color_system, highlight=False, soft_wrap=True, emoji=False),
            status=Console(stderr=True, color_system=color_system, highlight=False, soft_wrap=True, emoji=False),
            color=color,
        )

    def error(self, message: str) -> None:
        """Print an error line on stderr."""
        self.status.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_number(value: Any) -> str:
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return str(value)


def _text(value: Any) -> Optional[str]:
    """Printable string for an optional API field, None when empty."""
    if value is None or value == "":
        return None
    return escape(str(value))


def _badges(item: Mapping[str, Any]) -> str:
    badges = ""
    if item.get("is_verified"):
        badges += " [blue]✓[/blue]"
    if item.get("is_private"):
        badges += " [yellow]🔒[/yellow]"
    if item.get("is_business"):
        badges += " [cyan]🏢[/cyan]"
    return badges


def print_json(ctx: OutputContext, document: Any) -> None:
    """Emit the raw document as indented JSON."""
    ctx.out.print(json.dumps(document, indent=2, ensure_ascii=False), markup=False, highlight=False)


def format_profile(ctx: OutputContext, document: Dict[str, Any]) -> None:
    """Render a profile card."""
    out = ctx.out
    username = _text(document.get("username")) or "N/A"
    out.print(f"[bold]Profile:[/bold] [green]@{username}[/green]{_badges(document)}")

    out.print(f"[bold]Name:[/bold] [blue]{_text(document.get('full_name')) or 'N/A'}[/blue]")
    out.print(f"[bold]User ID:[/bold] [magenta]{_text(document.get('pk')) or 'N/A'}[/magenta]")

    biography = _text(document.get("biography"))
    if biography:
        out.print(f"[bold]Bio:[/bold] {biography}")

    for label, key, style in (
        ("Category", "category", "cyan"),
        ("Email", "public_email", "blue"),
        ("Website", "external_url", "blue"),
    ):
        value = _text(document.get(key))
        if value:
            out.print(f"[bold]{label}:[/bold] [{style}]{value}[/{style}]")

    out.print("\n[bold]Stats:[/bold]")
    out.print(f"  [cyan]Posts:[/cyan] [green]{format_number(document.get('media_count') or 0)}[/green]")
    out.print(f"  [cyan]Followers:[/cyan] [green]{format_number(document.get('follower_count') or 0)}[/green]")
    out.print(f"  [cyan]Following:[/cyan] [green]{format_number(document.get('following_count') or 0)}[/green]")

    picture = _text(document.get("profile_pic_url"))
    if picture:
        out.print(f"[bold]Profile Picture:[/bold] [blue]{picture}[/blue]")


def format_user_id(ctx: OutputContext, document: Dict[str, Any]) -> None:
    """Render the result of a username lookup."""
    ctx.out.print(f"[bold]User:[/bold] [green]@{_text(document.get('UserName')) or 'N/A'}[/green]")
    ctx.out.print(f"[bold]ID:[/bold] [magenta]{_text(document.get('UserID')) or 'N/A'}[/magenta]")


def format_user_list(ctx: OutputContext, document: Dict[str, Any], title: str) -> None:
    """Render a following/followers page (or all pages when auto-paginated)."""
    out = ctx.out
    users = document.get("users") or []
    header = f"[bold]{title}:[/bold] [green]{len(users)}[/green] users"
    next_max_id = _text(document.get("next_max_id"))
    if next_max_id:
        header += f" (next page: [yellow]{next_max_id}[/yellow])"
    out.print(header + "\n")

    for user in users:
        line = f"[bold]@{_text(user.get('username')) or 'N/A'}[/bold]{_badges(user)}"
        full_name = _text(user.get("full_name"))
        if full_name:
            line += f" - [cyan]{full_name}[/cyan]"
        followers = user.get("follower_count") or 0
        if followers:
            line += f" ([green]{format_number(followers)}[/green] followers)"
        out.print(line)
        out.print(f"  [magenta]ID:[/magenta] {_text(user.get('pk')) or 'N/A'}\n")


def _format_timestamp(value: Any) -> str:
    try:
        return datetime.fromtimestamp(int(value)).strftime("%Y-%m-%d %H:%M:%S")
    except (TypeError, ValueError, OverflowError, OSError):
        return "N/A"


def _format_duration(value: Any) -> Optional[str]:
    try:
        duration = float(value)
    except (TypeError, ValueError):
        return None
    return f"{duration:.1f}s" if duration > 0 else None


def format_reels(ctx: OutputContext, document: Dict[str, Any]) -> None:
    """Render reels as one card per media item."""
    out = ctx.out
    data = document.get("data") or {}
    items = data.get("items") or []
    header = f"[bold]Reels:[/bold] [green]{len(items)}[/green] items"
    paging_info = document.get("paging_info") or {}
    max_id = _text(paging_info.get("max_id"))
    if max_id:
        header += f" (next page: [yellow]{max_id}[/yellow])"
    out.print(header + "\n")

    for item in items:
        media = item.get("media") or {}
        user = media.get("user") or {}
        media_type = MEDIA_TYPES.get(media.get("media_type"), "Unknown")

        verified = " [blue]✓[/blue]" if user.get("is_verified") else ""
        out.print(f"[bold]{_text(media.get('code')) or 'N/A'}[/bold] [cyan]({media_type})[/cyan]{verified}")
        out.print(f"  [magenta]ID:[/magenta] {_text(media.get('pk')) or 'N/A'}")

        user_line = f"  [cyan]User:[/cyan] [green]@{_text(user.get('username')) or 'N/A'}[/green]"
        full_name = _text(user.get("full_name"))
        if full_name:
            user_line += f" ([cyan]{full_name}[/cyan])"
        out.print(user_line)
        out.print(f"  [cyan]Date:[/cyan] {_format_timestamp(media.get('taken_at'))}")

        duration = _format_duration(media.get("video_duration"))
        if duration:
            out.print(f"  [cyan]Duration:[/cyan] {duration}")

        out.print("\n[bold]Stats:[/bold]")
        out.print(f"  [green]Likes:[/green] {format_number(media.get('like_count') or 0)}")
        out.print(f"  [yellow]Comments:[/yellow] {format_number(media.get('comment_count') or 0)}")
        out.print(f"  [blue]Plays:[/blue] {format_number(media.get('play_count') or 0)}")

        caption = (media.get("caption") or {}).get("text")
        if caption:
            if len(caption) > CAPTION_LIMIT:
                caption = caption[:CAPTION_LIMIT] + "..."
            out.print("\n[bold]Caption:[/bold]")
            out.print(f"  {escape(caption)}")

        out.print(f"\n[bold]{SEPARATOR}[/bold]\n")
