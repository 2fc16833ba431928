"""
Unit tests for the command-line entry point.
"""
import re

import pytest

from oauth1_header.cli import main, parse_param
from conftest import RFC_NONCE, RFC_SIGNATURE, RFC_TIMESTAMP, RFC_URL


class TestCli:
    """Test oauth1-header command."""

    def test_rfc_example(self, credential_env, capsys):
        """Test fixed nonce and timestamp reproduce the published signature."""
        code = main([
            '--nonce', RFC_NONCE,
            '--timestamp', str(RFC_TIMESTAMP),
            'GET', RFC_URL, 'file=vacation.jpg', 'size=original'
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith('OAuth oauth_consumer_key="dpf43f3p2l4k3l03"')
        assert f'oauth_signature="{RFC_SIGNATURE}"' in out

    def test_random_nonce(self, credential_env, capsys):
        """Test a random nonce is used by default."""
        main(['GET', 'https://example.com'])

        out = capsys.readouterr().out
        assert re.search(r'oauth_nonce="[A-Za-z0-9]{32}"', out)

    def test_empty_nonce_is_used(self, credential_env, capsys):
        """Test an explicit empty nonce is kept rather than replaced."""
        main(['--nonce', '', '--timestamp', '1', 'GET', 'https://example.com'])

        assert 'oauth_nonce=""' in capsys.readouterr().out

    def test_unknown_method_warns(self, credential_env, capsys):
        """Test an unknown method falls back to GET with a warning."""
        main(['--nonce', 'n', '--timestamp', '1', 'FETCH', 'https://example.com'])
        fallback = capsys.readouterr()
        main(['--nonce', 'n', '--timestamp', '1', 'GET', 'https://example.com'])
        direct = capsys.readouterr()

        assert fallback.out == direct.out
        assert 'unknown method' in fallback.err

    def test_reserved_param_fails(self, credential_env, capsys):
        """Test a reserved parameter name is reported as an error."""
        code = main(['GET', 'https://example.com', 'oauth_token=x'])

        assert code == 1
        assert 'oauth_token' in capsys.readouterr().err

    def test_missing_credentials_exit(self, no_credential_env):
        """Test missing credentials exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(['GET', 'https://example.com'])

        assert exc_info.value.code == 1

    def test_bad_param_argument(self, credential_env):
        """Test an argument without = is rejected by argparse."""
        with pytest.raises(SystemExit) as exc_info:
            main(['GET', 'https://example.com', 'novalue'])

        assert exc_info.value.code == 2

    def test_parse_param_keeps_later_equals(self):
        """Test only the first = splits key and value."""
        assert parse_param('q=a=b') == ('q', 'a=b')
