"""Rich rendering helpers shared by CLI commands."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from avatargraph.graph import AvatarGraph, AvatarDistances, CheckResult, ValidationReport


def node_name(graph: AvatarGraph, node: int) -> str:
    """Return ``label (id)`` when the node carries a label, else the id."""
    label = graph.node_attributes(node).get("label")
    return f"{label} ({node})" if label else str(node)


def result_text(graph: AvatarGraph, result: CheckResult) -> str:
    if result.is_valid:
        return "VALID"
    offenders = []
    for item in result.offenders:
        if isinstance(item, tuple):
            offenders.append(f"{node_name(graph, item[0])} -> {node_name(graph, item[1])}")
        else:
            offenders.append(node_name(graph, item))
    return "INVALID: " + ", ".join(offenders)


def distances_table(
    graph: AvatarGraph, core: int, distances: AvatarDistances, highest: Optional[int]
) -> Table:
    table = Table(title=f"Avatar distances from core {node_name(graph, core)}")
    table.add_column("Node")
    table.add_column("Avatar distance", justify="right")
    table.add_column("Role")
    for node in graph.nodes():
        if node not in distances:
            table.add_row(node_name(graph, node), "-", "unreachable")
            continue
        if node == core:
            role = "core"
        elif node == highest:
            role = "highest avatar"
        else:
            role = ""
        table.add_row(node_name(graph, node), str(distances[node]), role)
    return table


def report_table(graph: AvatarGraph, report: ValidationReport) -> Table:
    table = Table(title="Invariants")
    table.add_column("Check")
    table.add_column("Result")
    for name, result in report.checks().items():
        table.add_row(name.replace("_", " "), result_text(graph, result))
    return table


def make_console(console: Optional[Console] = None) -> Console:
    return console or Console(highlight=False)
