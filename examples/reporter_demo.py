from packaging.requirements import Requirement
from packaging.utils import canonicalize_name

import dagkit

index = """
first
    second >= 1.0
    third == 2.0.0
second
    third >= 1.0
third
fourth
    second
"""


def splitstrip(s, parts):
    return [item.strip() for item in s.strip().split(maxsplit=parts - 1)]


def read_spec(lines):
    dependencies = {}
    latest = None
    for line in lines:
        if not line or line.startswith("#"):
            continue
        if not line.startswith(" "):
            latest = canonicalize_name(line.strip())
            dependencies[latest] = set()
        else:
            if latest is None:
                raise RuntimeError("Spec has dependencies before first package")
            requirement = Requirement(line.strip())
            dependencies[latest].add(canonicalize_name(requirement.name))
    return dependencies


class Reporter(dagkit.BaseReporter):
    def adding_vertex(self, vertex):
        print(f"adding_vertex({vertex.value})")

    def removing_vertex(self, vertex):
        print(f"removing_vertex({vertex.value})")

    def adding_edge(self, edge):
        print(f"  adding_edge({edge.source} -> {edge.target})")

    def removing_edge(self, edge):
        print(f"  removing_edge({edge.source} -> {edge.target})")

    def rejecting_edge(self, source, target, ancestors):
        print(f"  rejecting_edge({source} -> {target}, {sorted(ancestors)})")


def build_graph(dependencies, reporter):
    graph = dagkit.DirectedAcyclicGraph(reporter)
    for name in dependencies:
        graph.add_vertex(name)
    for name, names in dependencies.items():
        for dependency in sorted(names):
            graph.add_edge(name, dependency)
    return graph


if __name__ == "__main__":
    graph = build_graph(read_spec(index.splitlines()), Reporter())
    print(f"roots: {sorted(graph.roots)}")
    print(f"dependents of third: {sorted(graph.get_ancestors('third'))}")

    try:
        graph.add_edge("third", "first")
    except dagkit.CycleDetected as e:
        print(f"rejected: {e}")

    graph.remove_vertex("second")
    print(f"roots: {sorted(graph.roots)}")
