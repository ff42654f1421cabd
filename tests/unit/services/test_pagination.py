import pytest

from src.app.services.pagination import PageRequest, build_pagination


def test_last_page_of_three():
    meta = build_pagination(PageRequest(page=3, limit=10), total=25)

    assert meta.total_pages == 3
    assert meta.has_next is False
    assert meta.has_prev is True


def test_first_page():
    meta = build_pagination(PageRequest(page=1, limit=10), total=25)

    assert meta.has_next is True
    assert meta.has_prev is False


def test_empty_result():
    meta = build_pagination(PageRequest(), total=0)

    assert meta.total == 0
    assert meta.total_pages == 0
    assert meta.has_next is False


def test_offset():
    assert PageRequest(page=4, limit=25).offset == 75


def test_serializes_with_camel_case_keys():
    meta = build_pagination(PageRequest(page=2, limit=5), total=11)

    assert meta.model_dump(by_alias=True) == {
        "page": 2,
        "limit": 5,
        "total": 11,
        "totalPages": 3,
        "hasNext": True,
        "hasPrev": True,
    }


@pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, 101)])
def test_rejects_out_of_range(page, limit):
    with pytest.raises(ValueError):
        PageRequest(page=page, limit=limit)
