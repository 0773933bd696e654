import random

import pytest

from courtpairing.controllers.roster import (
    WaitlistManager,
    active_player_count,
    is_contiguous,
    waitlisted,
)
from courtpairing.exceptions import (
    DuplicatePlayerException,
    EmptyWaitlistException,
    InvalidConfigurationException,
    PlayerNotFoundException,
    PlayerNotOnWaitlistException,
)
from courtpairing.models import RosterPlayer


def _roster(manager, count):
    players = []
    for i in range(1, count + 1):
        manager.add_player(players, RosterPlayer(f"p{i}", name=f"Player {i}"))
    return players


def _by_id(players, player_id):
    return next(p for p in players if p.id == player_id)


def test_signups_past_capacity_are_waitlisted():
    manager = WaitlistManager(capacity=4)
    players = _roster(manager, 4)

    admission = manager.add_player(players, RosterPlayer("p5"))

    assert admission.active is False
    assert admission.waitlist_position == 1
    assert _by_id(players, "p5").waitlist_position == 1
    assert active_player_count(players) == 4


def test_removing_active_player_promotes_head():
    manager = WaitlistManager(capacity=4)
    players = _roster(manager, 5)

    promoted = manager.remove_player(players, "p1")

    assert promoted.id == "p5"
    assert promoted.is_active
    assert waitlisted(players) == []
    assert active_player_count(players) == 4


def test_waitlist_positions_follow_signup_order():
    manager = WaitlistManager(capacity=2)
    players = _roster(manager, 5)

    assert [(p.id, p.waitlist_position) for p in waitlisted(players)] == [
        ("p3", 1),
        ("p4", 2),
        ("p5", 3),
    ]
    assert [p.order_num for p in players] == [0, 1, 2, 3, 4]


def test_admit_does_not_touch_roster():
    manager = WaitlistManager(capacity=1)
    players = _roster(manager, 1)

    assert manager.admit(players).waitlist_position == 1
    assert len(players) == 1


def test_promote_next_on_empty_waitlist():
    manager = WaitlistManager(capacity=4)
    players = _roster(manager, 3)

    assert manager.promote_next(players) is None


def test_removing_waitlisted_player_closes_gap_without_promotion():
    manager = WaitlistManager(capacity=2)
    players = _roster(manager, 5)

    assert manager.remove_player(players, "p4") is None

    assert [(p.id, p.waitlist_position) for p in waitlisted(players)] == [
        ("p3", 1),
        ("p5", 2),
    ]
    assert active_player_count(players) == 2


def test_deactivating_active_player_promotes():
    manager = WaitlistManager(capacity=2)
    players = _roster(manager, 3)

    promoted = manager.deactivate(players, "p2")

    assert promoted.id == "p3"
    assert not _by_id(players, "p2").is_active
    assert is_contiguous(players)


def test_deactivating_waitlisted_player_keeps_place():
    manager = WaitlistManager(capacity=2)
    players = _roster(manager, 4)

    assert manager.deactivate(players, "p3") is None

    assert _by_id(players, "p3").waitlist_position == 1
    assert _by_id(players, "p4").waitlist_position == 2


def test_approve_grows_capacity_and_renumbers():
    manager = WaitlistManager(capacity=2)
    players = _roster(manager, 5)

    approved = manager.approve(players, "p4")

    assert approved.is_active
    assert manager.capacity == 3
    assert [(p.id, p.waitlist_position) for p in waitlisted(players)] == [
        ("p3", 1),
        ("p5", 2),
    ]


def test_approve_errors():
    manager = WaitlistManager(capacity=2)
    players = _roster(manager, 3)

    with pytest.raises(PlayerNotOnWaitlistException):
        manager.approve(players, "p1")
    with pytest.raises(PlayerNotFoundException):
        manager.approve(players, "nobody")


def test_approve_all_empties_the_waitlist():
    manager = WaitlistManager(capacity=46)
    players = _roster(manager, 50)

    approved = manager.approve_all(players)

    assert [p.id for p in approved] == ["p47", "p48", "p49", "p50"]
    assert waitlisted(players) == []
    assert manager.capacity == 48
    with pytest.raises(EmptyWaitlistException):
        manager.approve_all(players)


def test_duplicate_signup_rejected():
    manager = WaitlistManager(capacity=4)
    players = _roster(manager, 2)

    with pytest.raises(DuplicatePlayerException):
        manager.add_player(players, RosterPlayer("p1"))


@pytest.mark.parametrize("capacity", [0, 49])
def test_capacity_bounds(capacity):
    with pytest.raises(InvalidConfigurationException):
        WaitlistManager(capacity=capacity)


def test_remove_unknown_player():
    manager = WaitlistManager(capacity=2)

    with pytest.raises(PlayerNotFoundException):
        manager.remove_player(_roster(manager, 2), "p9")


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_keep_queue_contiguous_and_fifo(seed):
    rng = random.Random(seed)
    manager = WaitlistManager(capacity=4)
    players = []
    queue = []
    next_id = 1

    for _ in range(200):
        action = rng.choice(["add", "add", "remove", "deactivate"])
        if action == "add" or not players:
            player_id = f"p{next_id}"
            next_id += 1
            admission = manager.add_player(players, RosterPlayer(player_id))
            if not admission.active:
                queue.append(player_id)
        else:
            target = rng.choice(players)
            was_waitlisted = target.is_waitlisted
            if action == "remove":
                promoted = manager.remove_player(players, target.id)
                if was_waitlisted:
                    queue.remove(target.id)
            else:
                promoted = manager.deactivate(players, target.id)
            if promoted is not None:
                assert promoted.id == queue.pop(0)

        assert is_contiguous(players)
        assert [p.id for p in waitlisted(players)] == queue
        assert active_player_count(players) <= manager.capacity
