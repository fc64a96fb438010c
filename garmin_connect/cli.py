"""
Command line entry point for garmin-connect.
Logs in and stores tokens, lists activities and downloads activity files.
"""

import argparse
import asyncio
import logging
import sys

from garmin_connect.config import GarminConfig
from garmin_connect.exceptions import GarminConnectError
from garmin_connect.models.activity import ExportFileType
from garmin_connect.services.garmin_service import GarminConnect

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Garmin Connect command line client")
    parser.add_argument(
        "--token-dir",
        default=None,
        help="Directory holding exported tokens (default: GARMIN_TOKEN_DIR or data/garmin_tokens)"
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default: info)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("login", help="Log in with GARMIN_USERNAME/GARMIN_PASSWORD and export tokens")

    activities = subparsers.add_parser("activities", help="List recent activities")
    activities.add_argument("--limit", type=int, default=10, help="Number of activities (default: 10)")
    activities.add_argument("--type", dest="activity_type", default=None, help="Activity type, e.g. running")

    download = subparsers.add_parser("download", help="Download an activity file")
    download.add_argument("activity_id", help="Garmin activity id")
    download.add_argument("--dir", default=".", help="Target directory (default: current directory)")
    download.add_argument(
        "--format",
        default=ExportFileType.ZIP.value,
        choices=[t.value for t in ExportFileType],
        help="File format (default: zip)"
    )
    return parser


async def run(args: argparse.Namespace, config: GarminConfig) -> None:
    gc = GarminConnect(config)
    token_dir = args.token_dir or config.token_dir

    if args.command == "login":
        await gc.login()
        await gc.export_token_to_file(token_dir)
        print(f"Tokens saved to {token_dir}")
        return

    await gc.load_token_by_file(token_dir)

    if args.command == "activities":
        for activity in await gc.get_activities(0, args.limit, args.activity_type):
            activity_type = activity.activity_type.type_key if activity.activity_type else "-"
            distance_km = (activity.distance or 0) / 1000
            print(f"{activity.activity_id}  {activity.start_time_local or '-'}  {activity_type:<12} "
                  f"{distance_km:7.2f} km  {activity.activity_name or ''}")
    elif args.command == "download":
        path = await gc.download_original_activity_data(args.activity_id, args.dir, args.format)
        print(f"Saved {path}")


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, args.log_level.upper())
    )

    try:
        asyncio.run(run(args, GarminConfig()))
    except GarminConnectError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
