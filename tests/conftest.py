"""
Shared test fixtures for graphscope tests.

Provides reusable items, result sets and sessions for testing layout,
viewport, selection and popup placement.
"""

import pytest
from typing import List

from graphscope.config import GraphConfig, ScreenConfig
from graphscope.graph.abstraction import Item, ResultSet
from graphscope.session import GraphCallbacks, GraphSession, Suggestions


@pytest.fixture
def segment_items() -> List[Item]:
    """Five podcast segments with mutual connections."""
    return [
        Item(
            id="1",
            title="The Future of AI in Creative Industries",
            relevance=0.95,
            connections=frozenset({"2", "4"}),
            source="Tech Talk Daily",
            duration="8:45",
            tags=("AI", "creativity", "technology", "future"),
        ),
        Item(
            id="2",
            title="Machine Learning Ethics and Society",
            relevance=0.87,
            connections=frozenset({"1", "3"}),
            source="AI Ethics Podcast",
            duration="12:30",
            tags=("ML", "ethics", "society", "technology"),
        ),
        Item(
            id="3",
            title="Building Sustainable Tech Companies",
            relevance=0.76,
            connections=frozenset({"2", "5"}),
            source="Startup Stories",
            duration="15:20",
        ),
        Item(
            id="4",
            title="The Psychology of Innovation",
            relevance=0.82,
            connections=frozenset({"1", "5"}),
            source="Mind Matters",
            duration="9:15",
        ),
        Item(
            id="5",
            title="Remote Work Culture Evolution",
            relevance=0.69,
            connections=frozenset({"3", "4"}),
            source="Workplace Revolution",
            duration="11:40",
        ),
    ]


@pytest.fixture
def segment_results(segment_items) -> ResultSet:
    """Result set wrapping the five segments."""
    return ResultSet(segment_items)


class CallbackRecorder:
    """Records every host callback invocation."""

    def __init__(self):
        self.calls = []

    def callbacks(self) -> GraphCallbacks:
        return GraphCallbacks(
            on_preview=lambda item: self.calls.append(("preview", item.id)),
            on_add_to_target=lambda item: self.calls.append(("add", item.id)),
            on_suggestion_activated=lambda text: self.calls.append(("suggestion", text)),
            on_request_fullscreen=lambda: self.calls.append(("fullscreen", None)),
        )


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture
def session_config() -> GraphConfig:
    """Config with an 800x600 screen so world and screen line up at zoom 1."""
    return GraphConfig(screen=ScreenConfig(width=800, height=600))


@pytest.fixture
def session(session_config, segment_results, recorder) -> GraphSession:
    """A session showing the five segments."""
    graph = GraphSession(
        config=session_config,
        callbacks=recorder.callbacks(),
        suggestions=Suggestions(top=["AI ethics"], bottom=["startups"],
                                left=["innovation"], right=["remote work"]),
    )
    graph.set_results(segment_results)
    return graph
