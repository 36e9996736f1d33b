"""Lightweight REST client for the tradeval API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(name: str) -> dict[str, str]:
    if not name:
        return {}
    try:
        return json.loads(name)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the tradeval REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV to upload first")
    parser.add_argument("--team-a", nargs="*", default=[], help="Player names on side A")
    parser.add_argument("--team-b", nargs="*", default=[], help="Player names on side B")
    parser.add_argument("--team-c", nargs="*", default=None, help="Optional third group")
    parser.add_argument("--column-mapping", default="", help="JSON mapping for roster columns")
    parser.add_argument("--list-players", action="store_true", help="List loaded player names and exit")
    parser.add_argument("--report-path", type=Path, help="Save the plain-text trade report here")
    parser.add_argument("--reset", action="store_true", help="Clear the server-side roster and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.reset:
            resp = client.delete("/roster")
            resp.raise_for_status()
            print("Roster cleared")
            return

        if args.roster is not None:
            mapping = build_mapping(args.column_mapping)
            files = {"roster": (args.roster.name, args.roster.read_bytes(), "text/csv")}
            data = {"column_mapping": json.dumps(mapping)} if mapping else {}
            resp = client.post("/roster", files=files, data=data)
            if resp.status_code >= 400:
                raise SystemExit(f"roster rejected: {resp.json().get('detail')}")
            print("Roster summary:", json.dumps(resp.json(), indent=2))

        if args.list_players:
            resp = client.get("/players")
            resp.raise_for_status()
            print("\n".join(resp.json()["players"]))
            return

        payload = {"team_a": args.team_a, "team_b": args.team_b, "team_c": args.team_c}
        resp = client.post("/trade", json=payload)
        if resp.status_code == 409:
            raise SystemExit("no roster loaded; pass a roster CSV first")
        resp.raise_for_status()
        result = resp.json()
        for team in result["teams"]:
            print(
                f"Team {team['label']}: {team['count']} players, "
                f"score {team['total_score']:.2f}, TA {team['total_relative_value']:.2f}"
            )
        print(result["verdict"]["message"])

        if args.report_path:
            resp = client.post("/trade/report", json=payload)
            resp.raise_for_status()
            args.report_path.write_text(resp.text, encoding="utf-8")
            print(f"Report saved to {args.report_path}")


if __name__ == "__main__":
    main()
