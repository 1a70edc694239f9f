"""Fixtures for the readiness engine tests."""

import pytest

from release_readiness.models.jira import JiraSprint, JiraTicket, SprintState

ACTIVE = JiraSprint(id=2, name="Sprint 2", state=SprintState.ACTIVE)
CLOSED = JiraSprint(id=1, name="Sprint 1", state=SprintState.CLOSED)


@pytest.fixture
def make_ticket():
    """
    Factory for JiraTicket instances.

    ``sprint`` is one of "active", "closed" or "none".
    """

    def _make(number="FOO-1", sprint="active", released=True):
        sprints = {
            "active": (CLOSED, ACTIVE),
            "closed": (CLOSED,),
            "none": (),
        }[sprint]
        return JiraTicket(
            number=number,
            summary=f"Summary of {number}",
            release_versions=("1.2.0",) if released else (),
            sprints=sprints,
            current_sprint=ACTIVE if sprint == "active" else None,
        )

    return _make
