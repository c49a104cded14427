"""Render reconciliation reports for people and machines."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import tzinfo

    from nodeclaims.domain.model import NodeRecord
    from nodeclaims.domain.reconciliation import ReconciliationReport


@dataclass(frozen=True, slots=True)
class NodeReportRow:
    address: str
    name: str
    created_at: int
    created_at_formatted: str
    last_claim: int
    last_claim_formatted: str
    had_claim: bool


@dataclass(frozen=True, slots=True)
class ReportSummary:
    total_nodes: int
    nodes_with_claim: int
    single_claims_seen: int
    decode_failures: int


def format_timestamp(value: int, *, tz: tzinfo | None = UTC) -> str:
    """Format Unix seconds as ISO-8601 with an explicit UTC offset.

    With ``tz=None`` the local zone is used, with the offset in force at ``value``.
    """

    if tz is None:
        return datetime.fromtimestamp(value).astimezone().isoformat()
    return datetime.fromtimestamp(value, tz=tz).isoformat()


def build_rows(report: ReconciliationReport, *, tz: tzinfo | None = UTC) -> list[NodeReportRow]:
    return [
        NodeReportRow(
            address=node.owner,
            name=node.name,
            created_at=node.created_at,
            created_at_formatted=format_timestamp(node.created_at, tz=tz),
            last_claim=node.last_claim,
            last_claim_formatted=format_timestamp(node.last_claim, tz=tz),
            had_claim=node.had_claim,
        )
        for node in report.nodes
    ]


def summarize(report: ReconciliationReport) -> ReportSummary:
    return ReportSummary(
        total_nodes=report.nodes_created,
        nodes_with_claim=report.nodes_with_claim,
        single_claims_seen=report.single_claims_seen,
        decode_failures=report.decode_failure_count,
    )


def render_text(report: ReconciliationReport, *, tz: tzinfo | None = UTC) -> list[str]:
    lines = [
        f"{row.address}: {row.name} | created {row.created_at_formatted} | "
        f"last claim {row.last_claim_formatted}{'' if row.had_claim else ' (never claimed)'}"
        for row in build_rows(report, tz=tz)
    ]
    summary = summarize(report)
    lines.append(f"Total Nodes: {summary.total_nodes}")
    lines.append(f"Nodes With Claim: {summary.nodes_with_claim}")
    lines.append(f"Single Claims: {summary.single_claims_seen}")
    if summary.decode_failures:
        lines.append(f"Undecodable Transactions: {summary.decode_failures}")
    return lines


def render_json(report: ReconciliationReport, *, tz: tzinfo | None = UTC) -> str:
    document = {
        "nodes": [asdict(row) for row in build_rows(report, tz=tz)],
        "summary": asdict(summarize(report)),
    }
    return json.dumps(document, indent=2)


def render_node_list(nodes: Sequence[NodeRecord]) -> list[str]:
    """One ``address: name`` line per created node, then the node total."""

    lines = [f"{node.owner}: {node.name}" for node in nodes]
    lines.append(f"Total Nodes: {len(nodes)}")
    return lines
