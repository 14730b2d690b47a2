# scripts/seed_banners.py
"""
Insert banners straight into MongoDB. The HTTP service has no creation
endpoint, so this is how new banners get in.

    python scripts/seed_banners.py https://cdn.example.com/a.png
    python scripts/seed_banners.py --inactive https://cdn.example.com/old.png
    python scripts/seed_banners.py --list
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from errors import BannerServiceError  # noqa: E402
from models.banner import Banner  # noqa: E402
from storage.banners import BannerRepository  # noqa: E402
from storage.mongo_client import MongoConnection  # noqa: E402


def build_parser():
    parser = argparse.ArgumentParser(description="Seed banner image URLs.")
    parser.add_argument("urls", nargs="*", help="image URLs to insert")
    parser.add_argument("--inactive", action="store_true",
                        help="insert the banners already deactivated")
    parser.add_argument("--list", action="store_true",
                        help="print every stored banner and exit")
    return parser


def main(argv=None, connection=None):
    args = build_parser().parse_args(argv)
    try:
        if connection is None:
            connection = MongoConnection(
                config.MONGODB_URI,
                config.MONGODB_DB_NAME,
                server_selection_timeout_ms=config.MONGO_SERVER_SELECTION_TIMEOUT_MS,
            )
        repo = BannerRepository(connection, config.COLLECTION_BANNERS)

        if args.list:
            for banner in repo.all():
                state = "active" if banner.active else "inactive"
                print(f"{state:<8} {banner.created_at.isoformat()} {banner.url}")
            return 0

        if not args.urls:
            print("nothing to insert: pass at least one URL", file=sys.stderr)
            return 2

        banners = [Banner(url=u, active=not args.inactive) for u in args.urls]
        for banner in banners:
            banner_id = repo.add(banner)
            print(f"OK {banner_id} {banner.url}")
    except BannerServiceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
