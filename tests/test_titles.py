"""Tests for path/title validation."""

import pytest
from fastapi import HTTPException

from flatwiki.titles import get_title, is_valid_title


@pytest.mark.parametrize("prefix", ["view", "edit", "save"])
@pytest.mark.parametrize("title", ["FrontPage", "a", "Page2", "123"])
def test_valid_paths(prefix, title):
    assert get_title(f"/{prefix}/{title}") == title


@pytest.mark.parametrize(
    "path",
    [
        "/view/",
        "/view/Front-Page",
        "/view/Front Page",
        "/view/Front/Page",
        "/view/Page.txt",
        "/delete/FrontPage",
        "/view/FrontPage/",
        "view/FrontPage",
        "/view/FrontPage\n",
        "/all",
    ],
)
def test_invalid_paths_raise_404(path):
    with pytest.raises(HTTPException) as exc_info:
        get_title(path)
    assert exc_info.value.status_code == 404


def test_is_valid_title():
    assert is_valid_title("FrontPage")
    assert is_valid_title("abc123")
    assert not is_valid_title("")
    assert not is_valid_title("../etc")
    assert not is_valid_title("Front_Page")
