import pytest

from dagkit import BaseReporter, DirectedAcyclicGraph


class TestReporter(BaseReporter):
    __test__ = False

    def __init__(self):
        self.events = []

    def adding_vertex(self, vertex):
        self.events.append(("adding_vertex", vertex.value))

    def removing_vertex(self, vertex):
        self.events.append(("removing_vertex", vertex.value))

    def adding_edge(self, edge):
        self.events.append(("adding_edge", edge.source, edge.target))

    def removing_edge(self, edge):
        self.events.append(("removing_edge", edge.source, edge.target))

    def rejecting_edge(self, source, target, ancestors):
        self.events.append(("rejecting_edge", source, target, set(ancestors)))


@pytest.fixture(scope="session")
def reporter_cls():
    return TestReporter


@pytest.fixture()
def reporter(reporter_cls):
    return reporter_cls()


@pytest.fixture()
def graph(reporter):
    return DirectedAcyclicGraph(reporter)
