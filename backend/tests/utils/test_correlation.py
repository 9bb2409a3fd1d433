from hotel.utils.correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


def test_correlation_id_set_and_get() -> None:
    set_correlation_id("req-abc")
    assert get_correlation_id() == "req-abc"
    set_correlation_id(None)
    assert get_correlation_id() is None


def test_generate_correlation_id_is_not_empty() -> None:
    value = generate_correlation_id()
    assert isinstance(value, str)
    assert len(value) == 32


def test_scope_generates_and_restores() -> None:
    set_correlation_id(None)
    with correlation_scope() as cid:
        assert cid
        assert get_correlation_id() == cid
    assert get_correlation_id() is None


def test_scope_reuses_outer_id() -> None:
    with correlation_scope("outer"):
        with correlation_scope() as inner:
            assert inner == "outer"
        with correlation_scope("explicit") as explicit:
            assert explicit == "explicit"
        assert get_correlation_id() == "outer"
