import pytest

from blog_api.app.core.pagination import PER_PAGE, build_window, resolve_page


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 1), ("1", 1), ("3", 3), (" 2 ", 2), ("0", 1), ("-4", 1), ("abc", 1), ("2.5", 1), (7, 7)],
)
def test_resolve_page(raw, expected) -> None:
    assert resolve_page(raw) == expected


def test_window_for_full_first_page() -> None:
    window = build_window(page=1, total=23, count=PER_PAGE)

    assert window.current_page == 1
    assert window.last_page == 3
    assert window.per_page == 10
    assert window.total == 23
    assert window.from_ == 1
    assert window.to == 10


def test_window_for_last_page_ends_at_total() -> None:
    window = build_window(page=3, total=23, count=3)

    assert window.from_ == 21
    assert window.to == 23


def test_window_for_out_of_range_page_is_empty() -> None:
    window = build_window(page=5, total=23, count=0)

    assert window.current_page == 5
    assert window.last_page == 3
    assert window.from_ is None
    assert window.to is None


@pytest.mark.parametrize("total, last_page", [(0, 1), (1, 1), (10, 1), (11, 2), (20, 2), (101, 11)])
def test_last_page_is_ceiling_of_total(total, last_page) -> None:
    assert build_window(page=1, total=total, count=min(total, PER_PAGE)).last_page == last_page


def test_window_serialises_from_alias() -> None:
    dumped = build_window(page=1, total=2, count=2).model_dump(by_alias=True)

    assert dumped == {
        "current_page": 1,
        "last_page": 1,
        "per_page": 10,
        "total": 2,
        "from": 1,
        "to": 2,
    }
