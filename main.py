import argparse
import logging

import requests

from freeroom.config import get_active_config
from freeroom.errors import InvalidQuery
from freeroom.index_build import build_index
from freeroom.io_utils import fetch_feed, load_feed, parse_query, save_availability_csv
from freeroom.querying.evaluation import summary
from freeroom.querying.free_rooms import find_free_rooms


def main(argv=None):
    config = get_active_config()
    p = argparse.ArgumentParser(description="FreeRoom – find rooms with no lesson in a time window")
    # Feed source
    p.add_argument('--feed', type=str, help='Local courses-<semester>.json file')
    p.add_argument('--semester', type=str, default=None,
                   help=f"Fetch the published feed for this semester (default {config['current_semester']})")
    p.add_argument('--base-url', type=str, default=None, help='Where courses-<semester>.json is published')

    # Query
    p.add_argument('--day', type=str, required=True, help='Day name (ראשון..שישי) or letter (א..ו)')
    p.add_argument('--start', type=str, required=True, help='Window start, H:MM')
    p.add_argument('--end', type=str, required=True, help='Window end, H:MM')
    p.add_argument('--strict', action='store_true', help='Reject inverted or out-of-range windows')

    # Output
    p.add_argument('--out', type=str, default=None, help='Write free rooms to this CSV')
    p.add_argument('--verbose', action='store_true')
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        query = parse_query(args.day, args.start, args.end)
    except InvalidQuery as e:
        raise SystemExit(f"Invalid query: {e}")

    try:
        if args.feed:
            feed = load_feed(args.feed)
        else:
            feed = fetch_feed(args.semester or config['current_semester'], args.base_url)
    except (OSError, ValueError, requests.RequestException) as e:
        raise SystemExit(f"Could not load the timetable: {e}")

    index = build_index(feed)
    try:
        result = find_free_rooms(index.universe, index.records, query, strict=args.strict)
    except InvalidQuery as e:
        raise SystemExit(f"Invalid query: {e}")

    print(summary(index, query, result))
    if not result:
        print("No free rooms.")
    for building, rooms in result.items():
        print(f"{building}: {', '.join(rooms)}")

    if args.out:
        save_availability_csv(args.out, result)
        print(f"Saved: {args.out}")
    return result


if __name__ == '__main__':
    main()
