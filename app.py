import json
import logging
import os
import re

from flask import Flask, render_template_string, request
from werkzeug.routing import Rule


QRCODE_JS_URL = "https://cdnjs.cloudflare.com/ajax/libs/qrcodejs/1.0.0/qrcode.min.js"
QR_COLOR_DARK = "#d7263d"
QR_COLOR_LIGHT = "#ffffff"

URL_PATTERN = re.compile(
    r"(https?://)[\w.-]+(?:\.[\w.-]+)+[\w\-._~:/?#\[\]@!$&'()*+,;=.]+",
    re.IGNORECASE | re.ASCII,
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
	<meta charset="UTF-8">
	<title>QR Code Generator</title>
	<meta name="viewport" content="width=device-width, initial-scale=1.0">
	<style>
		:root {
			--bg: #f9fafb;
			--card-bg: #ffffff;
			--accent: #d7263d;
			--text: #111827;
			--error: #dc2626;
		}
		body {
			margin: 0;
			font-family: system-ui, sans-serif;
			background: var(--bg);
			color: var(--text);
			display: flex;
			flex-direction: column;
			align-items: center;
			padding: 2rem;
		}
		h1 {
			font-size: 2rem;
			margin-bottom: 1rem;
			text-align: center;
		}
		.form-card {
			background: var(--card-bg);
			padding: 2rem;
			border-radius: 1rem;
			box-shadow: 0 4px 12px rgba(0,0,0,0.1);
			width: 100%;
			max-width: 500px;
			box-sizing: border-box;
			display: flex;
			flex-direction: column;
			align-items: center;
		}
		input[type="url"] {
			width: 100%;
			padding: 1rem;
			border: 1px solid #d1d5db;
			border-radius: 0.5rem;
			font-size: 1rem;
			margin-bottom: 1rem;
			box-sizing: border-box;
		}
		button {
			background-color: var(--accent);
			color: white;
			padding: 0.75rem 1.5rem;
			border: none;
			border-radius: 0.5rem;
			font-size: 1rem;
			cursor: pointer;
			transition: background-color 0.2s ease;
		}
		button:hover {
			background-color: #a81d2b;
		}
		#error-msg {
			color: var(--error);
			margin-bottom: 1rem;
			font-size: 0.95rem;
		}
		#qrcode {
			margin-top: 2rem;
			display: flex;
			justify-content: center;
		}
		.back-link {
			margin-top: 2rem;
			text-decoration: none;
			color: var(--accent);
			font-size: 0.95rem;
		}
	</style>
</head>
<body>
	<h1>QR Code Generator</h1>
	<div class="form-card">
		{% if show_error %}<div id="error-msg">⚠️ Please enter a valid URL (starting with http:// or https://)</div>{% endif %}
		<form method="POST">
			<input type="url" name="text" placeholder="Enter a valid URL" required autocomplete="off" value="{{ value_attr|safe }}">
			<button type="submit">{{ "Regenerate" if show_qr else "Generate QR Code" }}</button>
		</form>
		{% if show_qr %}<div id="qrcode"></div>{% endif %}
	</div>
	{% if show_qr %}<a href="/" class="back-link">← Generate another</a>{% endif %}
	{% if show_qr %}<script src="{{ qrcode_js_url }}"></script>
	<script>
		const qrSize = Math.min(window.innerWidth * 0.8, 400);
		new QRCode(document.getElementById('qrcode'), {
			text: {{ qr_payload|safe }},
			width: qrSize,
			height: qrSize,
			colorDark: "{{ color_dark }}",
			colorLight: "{{ color_light }}"
		});
	</script>{% endif %}
</body>
</html>
"""

app = Flask(__name__)


def is_valid_url(text: str) -> bool:
    """
    Return True when ``text`` is an http(s) URL the page is willing to encode.
    The whole string must match, a trailing newline included, and ``\\w``
    covers ASCII word characters only.
    """
    return URL_PATTERN.fullmatch(text) is not None


def _escape_value_attr(text: str) -> str:
    return text.replace('"', "&quot;")


def render_page(text: str = "", is_valid: bool = True) -> str:
    """
    Build the full HTML document.
    A non-empty valid text gets the QR script block, a non-empty invalid
    text gets the inline warning, and an empty text gets the bare form.
    """
    show_qr = bool(is_valid and text)
    show_error = bool(not is_valid and text)
    return render_template_string(
        PAGE_TEMPLATE,
        show_qr=show_qr,
        show_error=show_error,
        value_attr=_escape_value_attr(text),
        qr_payload=json.dumps(text) if show_qr else "",
        qrcode_js_url=QRCODE_JS_URL,
        color_dark=QR_COLOR_DARK,
        color_light=QR_COLOR_LIGHT,
    )


def index(path: str = ""):
    text = ""
    is_valid = True

    if request.method == "POST":
        text = request.form.get("text", "")
        is_valid = is_valid_url(text)
        if text and not is_valid:
            app.logger.debug("Rejected submitted text %r", text)

    return render_page(text=text, is_valid=is_valid), 200, {"Content-Type": "text/html; charset=utf-8"}


# Rules without a method list match every method, OPTIONS included.
app.url_map.add(Rule("/", endpoint="index", defaults={"path": ""}))
app.url_map.add(Rule("/<path:path>", endpoint="index"))
app.view_functions["index"] = index


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")))
