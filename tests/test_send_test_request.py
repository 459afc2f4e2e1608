import json

import pytest

import send_test_request


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise send_test_request.requests.HTTPError(f"status {self.status_code}")


@pytest.mark.parametrize(
    "html, expected",
    [
        ('<div id="qrcode"></div>', "qr"),
        ('<div id="error-msg">bad</div>', "error"),
        ('<form method="POST"></form>', "form"),
    ],
)
def test_summarize_page(html, expected):
    assert send_test_request.summarize_page(html) == expected


def test_dry_run_prints_payload_without_request(monkeypatch, capsys):
    def fail(*args, **kwargs):
        raise AssertionError("no request expected")

    monkeypatch.setattr(send_test_request.requests, "post", fail)
    send_test_request.main(["https://example.com", "--dry-run"])

    assert json.loads(capsys.readouterr().out) == {"text": "https://example.com"}


def test_main_posts_form_and_saves_page(monkeypatch, capsys, tmp_path):
    calls = []

    def fake_post(url, data=None, timeout=None):
        calls.append((url, data, timeout))
        return FakeResponse('<div id="qrcode"></div>')

    monkeypatch.setattr(send_test_request.requests, "post", fake_post)
    output = tmp_path / "page.html"
    send_test_request.main(
        ["https://example.com", "--host", "http://server:5000/", "--output", str(output)]
    )

    assert calls == [("http://server:5000/", {"text": "https://example.com"}, 10)]
    out = capsys.readouterr().out
    assert "Status: 200" in out
    assert "Page: qr" in out
    assert output.read_text(encoding="utf-8") == '<div id="qrcode"></div>'


def test_main_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(
        send_test_request.requests,
        "post",
        lambda *args, **kwargs: FakeResponse("", status_code=502),
    )

    with pytest.raises(send_test_request.requests.HTTPError):
        send_test_request.main(["https://example.com"])
