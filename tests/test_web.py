"""Tests for the FastAPI integration."""

from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.testclient import TestClient

from pagenav import InvalidArgumentError, Pagination
from pagenav.core.config import get_config
from pagenav.urls import current_request_url
from pagenav.web import CurrentUrlMiddleware, pagination_dependency

POST_COUNT = 95

app = FastAPI()
app.add_middleware(CurrentUrlMiddleware)


@app.get("/posts", response_class=HTMLResponse)
async def posts(
    request: Request,
    pagination: Pagination = Depends(pagination_dependency(page_size=10)),
) -> HTMLResponse:
    if not request.state.pagination_total_known:
        pagination.set_total_count(POST_COUNT)
    return HTMLResponse(content=pagination.links() + pagination.pager())


@app.get("/defaults")
async def defaults(pagination: Pagination = Depends(pagination_dependency())):
    return {
        "query_key": pagination.query_key,
        "page_size": pagination.page_size,
        "wrapper": pagination.links_style.wrapper,
    }


@app.get("/current")
async def current():
    pagination = Pagination()
    known = pagination.initialize("p", 5)
    return {"url": current_request_url(), "page": pagination.current_page, "known": known}


@pytest.fixture()
def client():
    return TestClient(app)


def _request(query: bytes = b"") -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "path": "/posts",
        "query_string": query,
        "headers": [],
    })


class TestPaginationDependency:
    def test_first_page_counts_records(self, client):
        response = client.get("/posts")
        assert response.status_code == 200
        assert '<li class="active"><span>1</span></li>' in response.text
        assert 'href="http://testserver/posts?page=10of10"' in response.text
        assert "Next &raquo;" in response.text

    def test_known_total_skips_count(self, client):
        response = client.get("/posts", params={"page": "3of4"})
        assert response.status_code == 200
        assert '<li class="active"><span>3</span></li>' in response.text
        assert 'href="http://testserver/posts?page=4of4"' in response.text
        assert "10of" not in response.text

    def test_other_params_survive(self, client):
        response = client.get("/posts", params={"tag": "python", "page": "2of10"})
        assert 'href="http://testserver/posts?tag=python"' in response.text
        assert 'href="http://testserver/posts?tag=python&page=3of10"' in response.text

    def test_defaults_come_from_config(self, client, monkeypatch):
        monkeypatch.setenv("PAGENAV_CONFIG_NAME", "compact")
        response = client.get("/defaults")
        assert response.json() == {
            "query_key": "page",
            "page_size": 25,
            "wrapper": '<ul class="pagination">{{ value }}</ul>',
        }

    @pytest.mark.parametrize("kwargs,argument", [
        ({"page_size": 0}, "page_size"),
        ({"query_key": ""}, "query_key"),
    ])
    def test_explicit_falsy_arguments_are_not_replaced_by_config(self, kwargs, argument):
        dependency = pagination_dependency(**kwargs)
        with pytest.raises(InvalidArgumentError, match=argument):
            dependency(_request())

    def test_explicit_arguments_win_over_config(self):
        pagination = pagination_dependency(query_key="p", page_size=3)(_request(b"p=2of9"))
        assert pagination.query_key == "p"
        assert pagination.page_size == 3
        assert pagination.current_page == 2
        assert pagination.offset == 3

    def test_config_is_loaded_when_dependency_is_built(self):
        get_config.cache_clear()
        pagination_dependency()
        assert get_config.cache_info().currsize == 1


class TestCurrentUrlMiddleware:
    def test_request_url_is_visible_to_handlers(self, client):
        response = client.get("/current", params={"p": "4"})
        assert response.json() == {"url": "http://testserver/current?p=4", "page": 4, "known": False}

    def test_url_is_reset_after_request(self, client):
        client.get("/current", params={"p": "4"})
        assert current_request_url() == ""
