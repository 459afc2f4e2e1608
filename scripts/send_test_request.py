import argparse
import json
from pathlib import Path
from typing import Dict, Optional

import requests


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Submit text to the QR page and report which page came back."
    )
    parser.add_argument("text", help="Text to submit, normally a URL.")
    parser.add_argument(
        "--host",
        default="http://127.0.0.1:5000",
        help="Server host (default: http://127.0.0.1:5000).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to save the returned HTML page.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the form payload instead of sending the request.",
    )
    return parser.parse_args(argv)


def summarize_page(html: str) -> str:
    """Classify a returned page as "qr", "error" or "form"."""
    if 'id="qrcode"' in html:
        return "qr"
    if 'id="error-msg"' in html:
        return "error"
    return "form"


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    payload: Dict[str, str] = {"text": args.text}

    if args.dry_run:
        print(json.dumps(payload, indent=2))
        return

    response = requests.post(
        f"{args.host.rstrip('/')}/",
        data=payload,
        timeout=10,
    )

    print(f"Status: {response.status_code}")
    response.raise_for_status()
    print(f"Page: {summarize_page(response.text)}")

    if args.output:
        args.output.write_text(response.text, encoding="utf-8")
        print(f"Saved page to {args.output.resolve()}")


if __name__ == "__main__":
    main()
