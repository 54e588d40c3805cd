from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _parse_bool(value: str) -> bool:
    text = value.strip().lower()
    if text in ("true", "yes", "1"):
        return True
    if text in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"Expected true/false, got {value!r}")


def render_markdown(result) -> str:
    lines = [
        f"# {result.notice_type} ({result.jurisdiction_id})",
        "",
        f"- Service date: {result.service_date.isoformat()} ({result.delivery_method})",
        f"- Occupancy date: {result.occupancy_date.isoformat()}",
        f"- Eligible: {'yes' if result.eligibility.eligible else 'no'}",
    ]
    for reason in result.eligibility.reasons:
        lines.append(f"  - {reason.code}: {reason.message}")
    if result.effective_service_date is not None:
        lines.append(f"- Effective service date: {result.effective_service_date.isoformat()}")
    lines.append(f"- Notice period: {result.notice_period_days} days")
    if result.earliest_termination_date is not None:
        lines.append(f"- Earliest termination date: {result.earliest_termination_date.isoformat()}")

    if result.required_clauses:
        lines.append("")
        lines.append("## Required clauses")
        for clause in result.required_clauses:
            lines.append(f"- {clause.id}: {clause.text}")

    lines.append("")
    lines.append("## Audit")
    lines.append("")
    lines.append("| Step | Value | Rule |")
    lines.append("| --- | --- | --- |")
    for entry in result.audit:
        value = "" if entry.value is None else entry.value
        lines.append(f"| {entry.step} | {value} | {entry.rule_id} |")

    lines.append("")
    lines.append("## Citations")
    for citation in result.citations:
        lines.append(f"- {citation.label()}: {citation.url}")
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute effective service and earliest termination dates for a landlord notice."
    )
    parser.add_argument("--jurisdiction-id", default="CA-SACRAMENTO")
    parser.add_argument("--notice-type", default="OWNER_MOVE_IN_120_DAY")
    parser.add_argument("--service-date", required=True, help="YYYY-MM-DD")
    parser.add_argument("--occupancy-date", required=True, help="YYYY-MM-DD")
    parser.add_argument(
        "--delivery-method",
        required=True,
        help="PERSONAL, MAIL or POSTING_MAIL.",
    )
    parser.add_argument("--owner-is-natural-person", type=_parse_bool, default=True)
    parser.add_argument("--ownership-percent", type=float, required=True)
    parser.add_argument(
        "--rules-config",
        default=None,
        help="Optional JSON/YAML rules config (overrides NOTICE_RULES_CONFIG).",
    )
    parser.add_argument("--format", choices=("json", "markdown"), default="json")
    parser.add_argument("--output", default=None, help="Write to this file instead of stdout.")
    return parser


def main(argv: list[str] | None = None) -> int:
    _ensure_backend_on_path()
    from common.notice_engine.config import NoticeRulesConfig
    from common.notice_engine.errors import RequestValidationFailed
    from common.notice_engine.log_setup import configure_logging
    from common.notice_engine.models import NoticeComputeFailure
    from common.notice_engine.runner import compute_notice
    from common.notice_engine.settings import get_engine_settings
    from common.notice_engine.validation import validate_notice_request

    args = build_parser().parse_args(argv)
    settings = get_engine_settings()
    configure_logging(settings.log_level, stream=sys.stderr)

    if args.rules_config:
        rules_config = NoticeRulesConfig.from_file(Path(args.rules_config))
    else:
        rules_config = settings.load_rules_config()

    payload = {
        "jurisdictionId": args.jurisdiction_id,
        "noticeType": args.notice_type,
        "serviceDate": args.service_date,
        "occupancyDate": args.occupancy_date,
        "deliveryMethod": args.delivery_method,
        "ownerIsNaturalPerson": args.owner_is_natural_person,
        "ownershipPercent": args.ownership_percent,
    }
    try:
        facts = validate_notice_request(payload)
    except RequestValidationFailed as exc:
        for issue in exc.issues:
            print(f"{issue['path']}: {issue['message']}", file=sys.stderr)
        return 2

    outcome = compute_notice(facts, rules_config=rules_config)
    if isinstance(outcome, NoticeComputeFailure):
        print(outcome.error, file=sys.stderr)
        return 2

    if args.format == "markdown":
        text = render_markdown(outcome.result)
    else:
        text = json.dumps(outcome.to_wire(), indent=2) + "\n"

    if args.output:
        out_path = Path(args.output)
        out_path.write_text(text)
        print(f"Wrote {out_path}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
