# run.py

import argparse
import json
import sys

from dotenv import load_dotenv

load_dotenv()

from rich import print
from rich.logging import RichHandler
from rich.markup import escape

from core.config import configure_logging, get_settings
from core.models import Itinerary
from core.result import Err
from core.session import TripSession, regenerate, start_session


def print_itinerary(session: TripSession) -> None:
    req = session.request
    print(f"[bold green]Itinerary for {req['destination']}[/] "
          f"({req['startDate']} → {req['endDate']}, {req['budget']}, {req['pace']})")
    for d in Itinerary.from_payload(session.itinerary).days:
        print(f"\n[yellow]{d.date}[/]")
        for a in d.activities:
            print(f"  [cyan]{a.time}[/]  [bold]{escape(a.title)}[/]")
            if a.description:
                print(f"         {escape(a.description)}")


def print_error(result: Err) -> None:
    payload = result.error.to_payload()
    print(f"[bold red]Error ({result.error.http_status}):[/] {escape(payload['error'])}")
    if "details" in payload:
        print("[dim]" + escape(json.dumps(payload, ensure_ascii=False, default=str)) + "[/]")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a day-by-day trip itinerary with Gemini.")
    sub = p.add_subparsers(dest="command", required=True)

    plan = sub.add_parser("plan", help="generate a new itinerary")
    plan.add_argument("--dest", "--destination", dest="destination", required=True)
    plan.add_argument("--start", required=True)  # YYYY-MM-DD
    plan.add_argument("--end", required=True)    # YYYY-MM-DD
    plan.add_argument("--budget", choices=["low", "medium", "high"], required=True)
    plan.add_argument("--pace", choices=["relaxed", "balanced", "fast"], required=True)
    plan.add_argument("--interest", dest="interests", action="append", default=[])
    plan.add_argument("--save", metavar="SESSION_FILE", help="write request + itinerary to this JSON file")

    regen = sub.add_parser("regenerate", help="re-send the request stored in a session file")
    regen.add_argument("session_file")
    return p


def main(argv=None, generate=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level, handlers=[RichHandler(show_path=False)])

    if args.command == "plan":
        payload = {
            "destination": args.destination,
            "startDate": args.start,
            "endDate": args.end,
            "budget": args.budget,
            "pace": args.pace,
            "interests": args.interests,
        }
        print("[cyan]→ Generating itinerary…[/]")
        session, result = start_session(payload, generate)
        target = args.save
    else:
        session = TripSession.load(args.session_file)
        print(f"[cyan]→ Regenerating {session.request['destination']}…[/]")
        session, result = regenerate(session, generate)
        target = args.session_file

    if isinstance(result, Err):
        print_error(result)
        return 1

    print_itinerary(session)
    if target:
        session.save(target)
        print(f"\n[dim]Session saved to {target}[/]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
