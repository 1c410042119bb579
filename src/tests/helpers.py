"""
Shared helpers for driving a session through a round
"""
from gameplay_system import Target


def complete_level(session):
    """Select every remaining target of the current sequence in order"""
    snapshot = session.snapshot()
    for target in snapshot.random_sequence[snapshot.ref_index:]:
        assert session.submit_selection(target) is True


def wrong_target(session):
    """A target that is not the next expected one"""
    snapshot = session.snapshot()
    expected = snapshot.random_sequence[snapshot.ref_index]
    return next(target for target in Target if target != expected)
