import pytest

from src.adapter.repositories.base import like_pattern


@pytest.mark.parametrize(
    "term,expected",
    [
        ("harbor", "%harbor%"),
        ("50%", "%50\\%%"),
        ("room_1", "%room\\_1%"),
        ("C:\\linen", "%C:\\\\linen%"),
    ],
)
def test_like_pattern_matches_wildcards_literally(term, expected):
    assert like_pattern(term) == expected
