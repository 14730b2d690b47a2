# scripts/trigger_cleanup.py
"""
Call the cleanup endpoint of a deployed banner service, for schedulers
other than Vercel cron (crontab, CI jobs, …).

    BANNER_SERVICE_URL=https://example.vercel.app python scripts/trigger_cleanup.py
"""
import argparse
import os
import sys

import requests

CLEANUP_PATH = "/api/cleanup-banners"


def _headers(secret):
    headers = {"Accept": "application/json"}
    if secret:
        headers["Authorization"] = f"Bearer {secret}"
    return headers


def trigger_cleanup(base_url: str, secret: str = "", timeout: int = 30) -> dict:
    """
    Hit the cleanup endpoint once.
    Returns {"count": int} on success or {"error": str} on failure.
    """
    try:
        resp = requests.get(
            base_url.rstrip("/") + CLEANUP_PATH,
            headers=_headers(secret),
            timeout=timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        return {"count": data.get("count", 0), "message": data.get("message", "")}
    except requests.RequestException as exc:
        return {"error": str(exc)}
    except ValueError:
        return {"error": "response was not JSON"}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Trigger banner cleanup.")
    parser.add_argument("--url", default=os.getenv("BANNER_SERVICE_URL", ""),
                        help="base URL of the service (env BANNER_SERVICE_URL)")
    parser.add_argument("--secret", default=os.getenv("CRON_SECRET", ""),
                        help="bearer secret (env CRON_SECRET)")
    args = parser.parse_args(argv)

    if not args.url:
        print("BANNER_SERVICE_URL is not set", file=sys.stderr)
        return 2

    result = trigger_cleanup(args.url, args.secret)
    if "error" in result:
        print(f"cleanup failed: {result['error']}", file=sys.stderr)
        return 1
    print(f"cleanup ok, {result['count']} banners deactivated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
