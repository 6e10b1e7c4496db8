"""Tests for the command-line interface."""

import json
import os

import pytest

from igslurp import cli


@pytest.fixture
def run_cli(test_config, mock_session, monkeypatch, tmp_path):
    """Run the CLI against the test config and mock session."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("INSTAGRAM_API_KEY", raising=False)
    monkeypatch.setattr(cli, "get_config", lambda: test_config)
    monkeypatch.setattr("igslurp.core.client.requests.Session", lambda: mock_session)

    def _run(*argv):
        return cli.main(list(argv))

    return _run


def test_no_command_shows_help(run_cli, mock_session, capsys):
    """Test that running without a command prints help and succeeds."""
    assert run_cli() == 0

    assert "Commands:" in capsys.readouterr().err
    assert mock_session.get.call_count == 0


def test_unknown_command(run_cli, mock_session, capsys):
    """Test that unknown commands exit 1 with help."""
    assert run_cli("stories", "someone", "--key", "k") == 1

    err = capsys.readouterr().err
    assert "Unknown command: stories" in err
    assert "Commands:" in err
    assert mock_session.get.call_count == 0


def test_missing_value(run_cli, mock_session, capsys):
    """Test that a missing value exits 1."""
    assert run_cli("followers", "--key", "k") == 1

    assert "Username or user ID is required." in capsys.readouterr().err
    assert mock_session.get.call_count == 0


def test_missing_api_key(run_cli, mock_session, capsys):
    """Test that no key anywhere exits 1 before any request."""
    assert run_cli("profile", "someone") == 1

    assert "No Instagram API key found." in capsys.readouterr().err
    assert mock_session.get.call_count == 0


def test_key_from_file(run_cli, test_config, mock_session, make_response):
    """Test that the configured key file is used."""
    test_config.api_key_file.parent.mkdir(parents=True, exist_ok=True)
    test_config.api_key_file.write_text("file-key\n")
    mock_session.get.return_value = make_response({"username": "someone"})

    assert run_cli("profile", "someone") == 0

    assert mock_session.get.call_args.kwargs["headers"]["x-rapidapi-key"] == "file-key"


def test_key_from_dotenv(run_cli, mock_session, make_response, tmp_path):
    """Test that a .env file in the working directory provides the key."""
    (tmp_path / ".env").write_text("INSTAGRAM_API_KEY=dotenv-key\n")
    mock_session.get.return_value = make_response({"username": "someone"})

    try:
        assert run_cli("profile", "someone") == 0
    finally:
        os.environ.pop("INSTAGRAM_API_KEY", None)

    assert mock_session.get.call_args.kwargs["headers"]["x-rapidapi-key"] == "dotenv-key"


def test_profile_json(run_cli, mock_session, make_response, capsys):
    """Test raw JSON output."""
    payload = {"username": "someone", "pk": 12345}
    mock_session.get.return_value = make_response(payload)

    assert run_cli("profile", "someone", "--key", "k", "--json") == 0

    assert json.loads(capsys.readouterr().out) == payload
    mock_session.close.assert_called_once()


def test_profile_formatted(run_cli, mock_session, make_response, capsys):
    """Test formatted output."""
    mock_session.get.return_value = make_response({"username": "someone", "pk": 12345, "follower_count": 2000})

    assert run_cli("profile", "someone", "-k", "k", "-q") == 0

    out = capsys.readouterr().out
    assert "Profile: @someone" in out
    assert "Followers: 2,000" in out


def test_api_error_exits_1(run_cli, mock_session, make_response, capsys):
    """Test that an API-declared error exits 1."""
    mock_session.get.return_value = make_response({"error": "Invalid username"})

    assert run_cli("profile", "someone", "-k", "k") == 1

    captured = capsys.readouterr()
    assert "Instagram API returned: Invalid username" in captured.err
    assert captured.out == ""


def test_resolution_error_exits_1(run_cli, mock_session, make_response, capsys):
    """Test that an unresolvable username exits 1."""
    mock_session.get.return_value = make_response({"UserID": None})

    assert run_cli("following", "ghost", "-k", "k") == 1

    assert "Could not resolve username 'ghost' to user ID" in capsys.readouterr().err


def test_transport_error_exits_1(run_cli, mock_session, make_response, capsys):
    """Test that transport failures exit 1."""
    mock_session.get.return_value = make_response(ValueError("not json"), 502)

    assert run_cli("highlights", "someone", "-k", "k") == 1

    assert "Invalid JSON in response from highlights" in capsys.readouterr().err


def test_auto_paginate_error_returns_nothing(run_cli, mock_session, make_response, capsys):
    """Test that a paginated run failing on page one prints no data."""
    mock_session.get.return_value = make_response({"error": "rate limited"})

    assert run_cli("followers", "12345", "-k", "k", "--auto-paginate", "--json") == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "rate limited" in captured.err


def test_auto_paginate_following(run_cli, mock_session, make_response, capsys):
    """Test a full auto-paginated run with username resolution."""
    mock_session.get.side_effect = [
        make_response({"UserID": "42"}),
        make_response({"users": [{"pk": 1, "username": "a"}, {"pk": 2, "username": "b"}], "next_max_id": "X"}),
        make_response({"users": [{"pk": 3, "username": "c"}, {"pk": 4, "username": "d"}]}),
    ]

    assert run_cli("following", "someone", "-k", "k", "-a", "-j", "-c", "2") == 0

    captured = capsys.readouterr()
    assert [user["pk"] for user in json.loads(captured.out)["users"]] == [1, 2, 3, 4]
    assert "Found user ID: 42" in captured.err
    assert mock_session.get.call_count == 3
    assert mock_session.get.call_args_list[1].kwargs["params"] == {"user_id": "42", "count": "2"}


def test_invalid_count_rejected(run_cli):
    """Test that argparse rejects a non-positive count."""
    with pytest.raises(SystemExit) as exc_info:
        run_cli("followers", "42", "--count", "0")

    assert exc_info.value.code == 2


def test_config_option(temp_config_dir, mock_session, make_response, monkeypatch, tmp_path, capsys):
    """Test loading configuration from --config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("INSTAGRAM_API_KEY", raising=False)
    monkeypatch.setattr("igslurp.core.client.requests.Session", lambda: mock_session)
    config_file = temp_config_dir / "config.json"
    config_file.write_text(json.dumps({
        "config_dir": str(temp_config_dir),
        "base_url": "http://localhost:9000",
        "default_count": 7,
    }))

    assert cli.main(["posts", "someone", "-k", "k", "--config", str(config_file)]) == 0

    call = mock_session.get.call_args
    assert call.args[0] == "http://localhost:9000/feed"
    assert call.kwargs["params"]["count"] == "7"


def test_invalid_config_values_exit_1(temp_config_dir, mock_session, monkeypatch, tmp_path, capsys):
    """Test that a config file with invalid values stops the run."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("igslurp.core.client.requests.Session", lambda: mock_session)
    config_file = temp_config_dir / "config.json"
    config_file.write_text(json.dumps({"config_dir": str(temp_config_dir), "page_delay": -1}))

    assert cli.main(["posts", "someone", "-k", "k", "--config", str(config_file)]) == 1

    assert "Invalid configuration" in capsys.readouterr().err
    assert mock_session.get.call_count == 0
