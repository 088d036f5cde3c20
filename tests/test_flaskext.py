from urllib.parse import parse_qs
from urllib.parse import urlsplit

import flask
import pytest

from folio.collection import Collection
from folio.exception import InvalidPage
from folio.flaskext import FlaskRequestContext
from folio.flaskext import Folio
from folio.flaskext import get_config


@pytest.fixture
def app():
    app = flask.Flask(__name__)
    app.config["FOLIO_PER_PAGE"] = 5

    @app.route("/posts/", methods=["GET", "POST"])
    def posts():
        return ""

    @app.route("/users/<int:user_id>/posts")
    def user_posts(user_id):
        return ""

    return app


@pytest.fixture
def folio(app):
    return Folio(app)


def split_url(url):
    parts = urlsplit(url)
    return parts.path, parse_qs(parts.query)


def test_init_app(app, folio):
    config = app.extensions["folio"]
    assert config.per_page == 5
    assert "paginate_links" in app.jinja_env.globals
    assert "page_entries_info" in app.jinja_env.globals
    with app.app_context():
        assert get_config() is config


def test_get_config_requires_init(app):
    with app.app_context():
        with pytest.raises(RuntimeError):
            get_config()


def test_request_params(app):
    with app.test_request_context("/posts/?sort=name&list[page]=2&tag[]=a&tag[]=b"):
        context = FlaskRequestContext()
        assert context.is_get
        assert context.params == {
            "sort": "name",
            "list": {"page": "2"},
            "tag": ["a", "b"],
        }


def test_post_request(app):
    with app.test_request_context("/posts/", method="POST"):
        assert not FlaskRequestContext().is_get


def test_url_for(app):
    with app.test_request_context("/posts/"):
        url = FlaskRequestContext().url_for(
            {"escape": False, "sort": "name", "list": {"page": 3}, "tag": ["a"]}
        )
    assert split_url(url) == (
        "/posts/",
        {"sort": ["name"], "list[page]": ["3"], "tag[]": ["a"]},
    )


def test_url_for_keeps_view_args(app):
    with app.test_request_context("/users/7/posts?page=2"):
        url = FlaskRequestContext().url_for({"escape": False, "page": 3})
    assert split_url(url) == ("/users/7/posts", {"page": ["3"]})


def test_url_for_other_endpoint(app):
    with app.test_request_context("/users/7/posts"):
        url = FlaskRequestContext(endpoint="posts", external=True).url_for({"page": 2})
    assert url == "http://localhost/posts/?page=2"


def test_template_helpers(app, folio):
    collection = Collection(2, 5, 23).replace(range(5))
    template = "{{ paginate_links(posts) }}|{{ page_entries_info(posts, 'post') }}"
    with app.test_request_context("/posts/?sort=name"):
        rv = flask.render_template_string(template, posts=collection)
    links, info = rv.split("|")
    assert links.startswith('<div class="pagination">')
    assert '<em class="current">2</em>' in links
    assert "sort=name&amp;page=3" in links
    assert info == "Displaying posts <b>6&nbsp;-&nbsp;10</b> of <b>23</b> in total"


def test_template_helper_options(app, folio):
    collection = Collection(1, 5, 23).replace(range(5))
    template = "{{ paginate_links(posts, container=False, separator='|') }}"
    with app.test_request_context("/posts/"):
        rv = flask.render_template_string(template, posts=collection)
    assert rv.startswith('<span class="previous_page disabled">')
    assert rv.count("|") == 6


@pytest.mark.parametrize(
    "url, expected", [("/posts/", 1), ("/posts/?page=3", 3), ("/posts/?page=", 1)]
)
def test_get_page(app, folio, url, expected):
    with app.test_request_context(url):
        assert folio.get_page() == expected


def test_get_page_invalid(app, folio):
    with app.test_request_context("/posts/?page=abc"):
        with pytest.raises(InvalidPage):
            folio.get_page()


def test_get_page_nested_param_name(app):
    app.config["FOLIO_PARAM_NAME"] = "list[page]"
    folio = Folio(app)
    with app.test_request_context("/posts/?list[page]=4&page=2"):
        assert folio.get_page() == 4


@pytest.mark.parametrize(
    "query",
    ["endpoint=x", "_external=1", "_anchor=top", "_scheme=ftp", "_method=POST"],
)
def test_query_params_named_like_url_for_arguments(app, folio, query):
    collection = Collection(2, 5, 23).replace(range(5))
    name, value = query.split("=")
    with app.test_request_context("/posts/?%s&sort=name" % query):
        html = flask.render_template_string("{{ paginate_links(posts) }}", posts=collection)
        url = FlaskRequestContext().url_for({"escape": False, name: value, "page": 3})
    assert 'href="/posts/?' in html
    assert "#top" not in html
    assert "localhost" not in html
    assert split_url(url) == ("/posts/", {name: [value], "page": ["3"]})


def test_query_param_does_not_replace_view_arg(app):
    with app.test_request_context("/users/7/posts?user_id=9"):
        url = FlaskRequestContext().url_for({"escape": False, "user_id": "9", "page": 2})
    assert split_url(url) == ("/users/7/posts", {"user_id": ["9"], "page": ["2"]})
