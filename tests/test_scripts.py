import requests

from scripts import seed_banners, trigger_cleanup


def test_seed_inserts_active_banners(connection, collection, capsys):
    rc = seed_banners.main(
        ["https://cdn.example.com/a.png", "https://cdn.example.com/b.png"],
        connection=connection,
    )
    assert rc == 0
    assert collection.count_documents({"active": True}) == 2
    assert "https://cdn.example.com/a.png" in capsys.readouterr().out


def test_seed_inactive(connection, collection):
    assert seed_banners.main(["--inactive", "https://cdn.example.com/a.png"],
                             connection=connection) == 0
    assert collection.count_documents({"active": False}) == 1


def test_seed_rejects_empty_url(connection, collection):
    assert seed_banners.main([""], connection=connection) == 1
    assert collection.count_documents({}) == 0


def test_seed_without_urls(connection):
    assert seed_banners.main([], connection=connection) == 2


def test_seed_list(connection, seed, capsys):
    seed("https://cdn.example.com/a.png")
    seed("https://cdn.example.com/b.png", active=False)
    assert seed_banners.main(["--list"], connection=connection) == 0
    out = capsys.readouterr().out
    assert "active" in out and "inactive" in out


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def test_trigger_sends_bearer_secret(monkeypatch):
    seen = {}

    def fake_get(url, headers=None, timeout=None):
        seen.update(url=url, headers=headers)
        return FakeResponse(200, {"message": "ok", "count": 4})

    monkeypatch.setattr(trigger_cleanup.requests, "get", fake_get)
    result = trigger_cleanup.trigger_cleanup("https://svc.example.com/", "s3cret")

    assert result["count"] == 4
    assert seen["url"] == "https://svc.example.com/api/cleanup-banners"
    assert seen["headers"]["Authorization"] == "Bearer s3cret"


def test_trigger_reports_http_errors(monkeypatch, capsys):
    monkeypatch.setattr(trigger_cleanup.requests, "get",
                        lambda *a, **kw: FakeResponse(500, {"error": "x"}))
    rc = trigger_cleanup.main(["--url", "https://svc.example.com"])
    assert rc == 1
    assert "cleanup failed" in capsys.readouterr().err


def test_trigger_needs_url(monkeypatch):
    monkeypatch.delenv("BANNER_SERVICE_URL", raising=False)
    assert trigger_cleanup.main(["--url", ""]) == 2
