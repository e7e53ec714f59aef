"""
In-memory state and session stores: one-time tokens, expiry and sweeps.
"""

from identity_access import stores
from identity_access.stores import SessionStore, StateStore


def test_state_token_is_single_use_and_keeps_redirect():
    store = StateStore()
    rec = store.create(redirect="/profile/tutor")
    popped = store.pop_valid(rec.state)
    assert popped is not None
    assert popped.redirect == "/profile/tutor"
    assert store.pop_valid(rec.state) is None


def test_expired_state_tokens_are_evicted_on_create():
    store = StateStore()
    for _ in range(500):
        store.create(ttl_seconds=-1)
    fresh = store.create()
    assert list(store._data) == [fresh.state]


def test_state_tokens_expire_with_time(monkeypatch):
    store = StateStore()
    monkeypatch.setattr(stores, "_now", lambda: 1_000)
    rec = store.create(ttl_seconds=60)
    monkeypatch.setattr(stores, "_now", lambda: 2_000)
    assert store.purge_expired() == 1
    assert store.pop_valid(rec.state) is None


def test_session_purge_returns_expired_ids_only():
    store = SessionStore()
    live = store.create(user_id="u-1", email="", access_token="t")
    dead = store.create(user_id="u-2", email="", access_token="t", ttl_seconds=-1)

    assert store.purge_expired() == [dead.session_id]
    assert store.get(live.session_id) is not None
    assert store.purge_expired() == []


def test_expired_session_is_dropped_on_lookup():
    store = SessionStore()
    rec = store.create(user_id="u-1", email="", access_token="t", ttl_seconds=-1)
    assert store.get(rec.session_id) is None
    assert rec.session_id not in store._data
