# purecheck/cli.py
"""
PureCheck command line

    purecheck analyze "Aqua, Methylparaben, BPA" --filter pregnancy
    echo "Aqua, Parfum" | purecheck analyze - --json
    purecheck wiki paraben --category Paraben
    purecheck serve
"""

from typing import List, Optional, Sequence
import argparse
import asyncio
import json
import sys

from .core.exceptions import PureCheckException
from .engine.analyzer import get_analyzer
from .engine.filters import apply_filters
from .rules.reference_database import get_reference_database, make_key
from .schemas.domain_models import AnalysisReport, FilterCriteria, FilterType, IngredientRecord


RISK_MARKERS = {
    "HIGH": "[!!]",
    "MODERATE": "[! ]",
    "LOW": "[ok]",
    "UNKNOWN": "[??]",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="purecheck", description="Cosmetic ingredient risk analysis")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze an ingredient list")
    analyze_parser.add_argument("text", help="Ingredient list, or '-' to read stdin")
    analyze_parser.add_argument(
        "--filter", dest="filters", action="append", default=[],
        choices=[f.value for f in FilterType], help="Concern filter (repeatable)"
    )
    analyze_parser.add_argument("--backend", choices=["local", "gemini"], help="Override analyzer backend")
    analyze_parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    wiki_parser = subparsers.add_parser("wiki", help="Search the ingredient reference database")
    wiki_parser.add_argument("query", nargs="?", default="", help="Substring of name or category")
    wiki_parser.add_argument("--category", help="Restrict to one category")
    wiki_parser.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers.add_parser("serve", help="Run the HTTP API")

    return parser


def format_record(record: IngredientRecord) -> str:
    marker = RISK_MARKERS.get(record.risk_level.value, "[  ]")
    line = f"  {marker} {record.name} ({record.category}) - pregnancy: {record.pregnancy_safety.value}"
    if record.tags:
        line += f" [{', '.join(record.tags)}]"
    return line


def format_report(report: AnalysisReport, filtered: Sequence[IngredientRecord], criteria: FilterCriteria) -> str:
    concerns = report.concerns
    lines = [
        f"Purity score: {report.overall_score}/100",
        report.summary,
        f"Concerns: endocrine {concerns.endocrine}%, pregnancy {concerns.pregnancy}%, "
        f"skin {concerns.skin}%, pcos {concerns.pcos}%",
    ]
    if criteria:
        lines.append(f"Ingredients matching {', '.join(criteria.to_tokens())} ({len(filtered)}/{len(report.ingredients)}):")
    else:
        lines.append(f"Ingredients ({len(report.ingredients)}):")
    lines.extend(format_record(record) for record in filtered)
    return "\n".join(lines)


def run_analyze(args: argparse.Namespace) -> int:
    text = sys.stdin.read() if args.text == "-" else args.text
    analyzer = get_analyzer(backend=args.backend)
    report = asyncio.run(analyzer.analyze(text))
    criteria = FilterCriteria.from_tokens(args.filters)
    filtered = apply_filters(report, criteria)

    if args.json:
        print(json.dumps({
            "report": report.to_json_dict(),
            "filters": list(criteria.to_tokens()),
            "filtered": [record.to_json_dict() for record in filtered]
        }, indent=2, ensure_ascii=False))
    else:
        print(format_report(report, filtered, criteria))
    return 0


def run_wiki(args: argparse.Namespace) -> int:
    database = get_reference_database()
    records = database.search(args.query, args.category)
    if args.json:
        print(json.dumps([record.to_json_dict() for record in records], indent=2, ensure_ascii=False))
        return 0

    print(f"{len(records)} ingredient(s):")
    for record in records:
        line = format_record(record)
        if database.is_monitored(make_key(record.name)):
            line += " (monitor list, no curated detail)"
        print(line)
        if record.harm_description:
            print(f"       {record.harm_description} (source: {record.evidence_source})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "analyze":
            return run_analyze(args)
        elif args.command == "wiki":
            return run_wiki(args)
        elif args.command == "serve":
            from .api.main import run
            run()
            return 0
        else:
            parser.print_help()
            return 2
    except PureCheckException as e:
        print(f"Error [{e.error_code.value}]: {e.user_message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
