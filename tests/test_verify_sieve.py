"""
Tests for the sieve verification script.
"""

import pytest

from eratosthenes.experiments import verify_sieve


class TestVerifications:
    """Each check passes on a correct sieve."""

    @pytest.mark.parametrize("limit", [0, 1, 2, 1000])
    def test_against_reference(self, limit):
        assert verify_sieve.verify_against_reference(limit, verbose=False)

    @pytest.mark.parametrize("limit", [0, 1, 2, 1000])
    def test_properties(self, limit):
        assert verify_sieve.verify_properties(limit, verbose=False)

    def test_known_counts(self):
        assert verify_sieve.verify_known_counts(verbose=False)


class TestDetectsFaults:
    """A broken sieve is reported as a failure."""

    def test_reference_mismatch(self, monkeypatch, capsys):
        monkeypatch.setattr(verify_sieve, 'generate_primes', lambda limit: [2, 3, 4, 5, 7])
        assert not verify_sieve.verify_against_reference(10, verbose=False)
        assert 'EXTRA value 4' in capsys.readouterr().out

    def test_known_count_mismatch(self, monkeypatch):
        monkeypatch.setattr(verify_sieve, 'prime_count', lambda limit: 0)
        assert not verify_sieve.verify_known_counts(verbose=False)


class TestMain:
    """Test the script entry point."""

    def test_main_passes(self, capsys):
        assert verify_sieve.main(['--limit', '2000']) == 0
        assert 'All verifications passed' in capsys.readouterr().out

    def test_main_fails(self, monkeypatch, capsys):
        monkeypatch.setattr(verify_sieve, 'prime_count', lambda limit: 0)
        assert verify_sieve.main(['--limit', '100']) == 1
        assert 'Some verifications failed' in capsys.readouterr().out

    def test_negative_limit(self):
        with pytest.raises(SystemExit) as exc:
            verify_sieve.main(['--limit', '-1'])
        assert exc.value.code == 2

    @pytest.mark.parametrize("value", ['nan', 'inf', '1.5'])
    def test_non_whole_limit(self, value, capsys):
        with pytest.raises(SystemExit) as exc:
            verify_sieve.main(['--limit', value])
        assert exc.value.code == 2
        assert 'whole number' in capsys.readouterr().err


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
