import requests

import run_search


def _no_network(*args, **kwargs):
    raise AssertionError("network call made")


class TestMain:
    def test_force_fallback_prints_report(self, monkeypatch, capsys):
        monkeypatch.setattr(requests, "post", _no_network)
        code = run_search.main(["--force-fallback", "--no-report", "--location", "Graz", "--types", "Contract"])

        out = capsys.readouterr().out
        assert code == 0
        assert "- **Location:** Graz" in out
        assert "- **Job types:** Contract" in out
        assert "Found 4 Jobs" in out

    def test_invalid_type_exits_2(self):
        assert run_search.main(["--force-fallback", "--no-report", "--types", "Freelance"]) == 2
