"""Tests for terminal rendering."""

import json

from igslurp.formatters import (
    CAPTION_LIMIT,
    OutputContext,
    format_number,
    format_profile,
    format_reels,
    format_user_id,
    format_user_list,
    print_json,
)


def _stdout(ctx):
    return ctx.out.file.getvalue()


def test_color_disabled_when_quiet():
    """Test that --quiet turns color off."""
    assert OutputContext.create(quiet=True, environ={"TERM": "xterm"}).color is False


def test_color_disabled_for_dumb_or_missing_terminal():
    """Test terminal detection."""
    assert OutputContext.create(environ={"TERM": "dumb"}).color is False
    assert OutputContext.create(environ={}).color is False
    assert OutputContext.create(environ={"TERM": "xterm-256color"}).color is True


def test_format_number():
    assert format_number(1500) == "1,500"
    assert format_number("42") == "42"
    assert format_number(None) == "None"


def test_format_profile(output_context):
    """Test the profile card."""
    format_profile(output_context, {
        "pk": 123456789,
        "username": "testuser",
        "full_name": "Test User",
        "biography": "Hello [world]",
        "is_verified": True,
        "follower_count": 1500,
        "following_count": 300,
        "media_count": 42,
        "external_url": "https://example.com",
    })

    output = _stdout(output_context)
    assert "Profile: @testuser ✓" in output
    assert "User ID: 123456789" in output
    assert "Bio: Hello [world]" in output
    assert "Website: https://example.com" in output
    assert "Followers: 1,500" in output
    assert "Email:" not in output


def test_format_user_id(output_context):
    format_user_id(output_context, {"UserID": 44196397, "UserName": "elonmusk"})

    output = _stdout(output_context)
    assert "User: @elonmusk" in output
    assert "ID: 44196397" in output


def test_format_user_list(output_context, raw_user):
    """Test the following/followers listing."""
    format_user_list(
        output_context,
        {"users": [raw_user(1, "alice"), raw_user(2, "bob")], "next_max_id": "X"},
        "Following",
    )

    output = _stdout(output_context)
    assert "Following: 2 users (next page: X)" in output
    assert "@alice - Alice Name (1,200 followers)" in output
    assert "ID: 2" in output


def test_format_reels(output_context):
    """Test reel cards, including caption truncation."""
    format_reels(output_context, {
        "data": {"items": [{
            "media": {
                "pk": 99,
                "code": "ABC123",
                "media_type": 2,
                "taken_at": "not-a-timestamp",
                "video_duration": 12.34,
                "like_count": 1000,
                "caption": {"text": "x" * (CAPTION_LIMIT + 50)},
                "user": {"username": "creator", "is_verified": True},
            }
        }]},
        "paging_info": {"max_id": "R2"},
    })

    output = _stdout(output_context)
    assert "Reels: 1 items (next page: R2)" in output
    assert "ABC123 (Video) ✓" in output
    assert "User: @creator" in output
    assert "Date: N/A" in output
    assert "Duration: 12.3s" in output
    assert "Likes: 1,000" in output
    assert "x" * CAPTION_LIMIT + "..." in output


def test_print_json(output_context):
    """Test raw JSON output."""
    document = {"users": [{"pk": 1, "username": "[bold]"}]}

    print_json(output_context, document)

    assert json.loads(_stdout(output_context)) == document


def test_error_goes_to_status(output_context):
    output_context.error("Unknown command: nope")

    assert "Error: Unknown command: nope" in output_context.status.file.getvalue()
    assert _stdout(output_context) == ""
