from folio.context import StaticRequestContext


def test_static_context_defaults():
    context = StaticRequestContext("/items")
    assert context.is_get
    assert context.params == {}
    assert context.url_for({"escape": False}) == "/items"


def test_static_context_method():
    assert not StaticRequestContext("/items", method="post").is_get


def test_static_context_decodes_flat_params():
    context = StaticRequestContext("/items", [("list[page]", "2"), ("q", "x")])
    assert context.params == {"list": {"page": "2"}, "q": "x"}
    context = StaticRequestContext("/items", {"list[page]": "2"})
    assert context.params == {"list": {"page": "2"}}


def test_static_context_url_for():
    context = StaticRequestContext("/items?lang=en")
    url = context.url_for({"escape": False, "page": 2, "tags": ["a", "b"]})
    assert url == "/items?lang=en&page=2&tags%5B%5D=a&tags%5B%5D=b"
