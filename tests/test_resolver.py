import logging
from dataclasses import dataclass

import pytest

from pathquery import MethodTable, Query, QueryConfig, evaluate
from pathquery.core.registry import AdapterRegistry


class Page:
    def __init__(self, slug, children=()):
        self.slug = slug
        self._children = list(children)

    def title(self):
        return self.slug.title()

    def children(self):
        return self._children

    def find(self, slug):
        for child in self._children:
            if child.slug == slug:
                return child
        return None


@dataclass
class User:
    name: str
    age: int


class Anything:
    def __getattr__(self, name):
        return lambda *args: (name, args)


@pytest.mark.parametrize("context", [{"a": 1}, ["x"], 5, "text", None, Page("home")])
def test_empty_path_returns_root(context):
    assert evaluate("", context) is context
    assert evaluate(None, context) is context


def test_whitespace_path_looks_up_empty_key():
    assert evaluate("  ", {"": 1}) == 1
    assert evaluate("  ", {"a": 1}) is None


def test_nested_mapping_lookup():
    assert evaluate("a.b.c", {"a": {"b": {"c": 42}}}) == 42


def test_missing_key_is_none():
    assert evaluate("a.b", {"a": {}}) is None
    assert evaluate("x", {}) is None


def test_sequences_are_looked_up_by_index_key():
    data = {"list": ["x", "y"]}
    assert evaluate("list.0", data) == "x"
    assert evaluate("list.1", data) == "y"
    assert evaluate("list.2", data) is None
    assert evaluate("list.-1", data) is None
    assert evaluate("list.first", data) is None
    assert evaluate("list.01", data) is None
    assert evaluate("list.00", data) is None


def test_mapping_integer_keys():
    assert evaluate("codes.404", {"codes": {404: "not found"}}) == "not found"
    assert evaluate("codes.404", {"codes": {"404": "str key", 404: "int key"}}) == "str key"


def test_mapping_ignores_call_arguments():
    assert evaluate("a(1, 2)", {"a": 5}) == 5


def test_method_call_with_string_argument():
    entity = MethodTable({"greet": lambda name: "Hi " + name})
    assert evaluate('greet("Bob")', entity) == "Hi Bob"


def test_quoted_argument_is_not_split():
    entity = MethodTable({"f": lambda *args: list(args)})
    assert evaluate('f("a.b,c")', entity) == ["a.b,c"]
    assert evaluate("f(1, 'x', [true, null])", entity) == [1.0, "x", [True, None]]
    assert evaluate("f()", entity) == []


def test_scalar_root_short_circuits():
    assert evaluate("a.b(1).c", 42) == 42
    assert evaluate("x", "hello") == "hello"
    assert evaluate("x.y", True) is True
    assert evaluate("x", None) is None


def test_scalar_step_keeps_parent_as_traversal_value():
    data = {"a": {"b": 1, "c": {"d": 2}}}
    assert evaluate("a.b.c.d", data) == 2
    assert evaluate("a.b.missing", data) is None
    assert evaluate("a.missing.b", data) == 1


def test_object_methods():
    site = Page("home", [Page("about"), Page("blog")])
    data = {"site": site}
    assert evaluate('site.find("about").title()', data) == "About"
    assert evaluate('site.find("blog").slug', data) == "blog"
    assert evaluate("site.children.1.slug", data) == "blog"
    assert evaluate('site.find("nope").title()', data) == "Home"


def test_object_attributes_act_as_accessors():
    data = {"user": User("Ada", 36)}
    assert evaluate("user.name", data) == "Ada"
    assert evaluate("user.age(1, 2)", data) == 36
    assert evaluate("user.email", data) is None


def test_getattr_is_catch_all():
    assert evaluate('anything(1, "x")', Anything()) == ("anything", (1.0, "x"))


def test_method_table_fallback():
    entity = MethodTable({"known": lambda: "k"}, fallback=lambda name, *args: f"{name}:{len(args)}")
    assert evaluate("known", entity) == "k"
    assert evaluate("foo(1, 2)", entity) == "foo:2"


def test_missing_method_is_none():
    entity = MethodTable({"x": lambda: 1})
    assert evaluate("missing()", entity) is None
    assert evaluate("missing", Page("home")) is None


def test_method_errors_propagate():
    def boom():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        evaluate("svc.boom()", {"svc": MethodTable({"boom": boom})})


def test_nested_path_arguments_resolve_against_root():
    root = {
        "tag": "news",
        "site": MethodTable({
            "tag": lambda: "wrong",
            "pages": lambda tag: f"pages:{tag}",
            "pick": lambda items: items,
        }),
    }
    assert evaluate("site.pages(tag)", root) == "pages:news"
    assert evaluate('site.pick([tag, "x"])', root) == ["news", "x"]
    assert evaluate("site.pages(missing.key)", root) == "pages:None"


def test_arguments_of_mapping_steps_are_not_resolved():
    calls = []
    root = {"a": 1, "probe": MethodTable({"hit": lambda: calls.append(1)})}
    assert evaluate("a(probe.hit())", root) == 1
    assert calls == []


def test_repeated_evaluation_is_stable():
    data = {"site": Page("home", [Page("about")])}
    first = evaluate('site.find("about").title()', data)
    second = evaluate('site.find("about").title()', data)
    assert first == second == "About"


def test_trace_records_each_step():
    t = Query("a.b", {"a": {"b": 2}}).trace()
    assert t["segments"] == ["a", "b"]
    assert [s["segment"] for s in t["steps"]] == ["a", "b"]
    assert t["steps"][0]["kind"] == "mapping"
    assert t["value"] == 2


def test_trace_of_empty_path():
    t = Query("", {"a": 1}).trace()
    assert t["steps"] == []
    assert t["value"] == {"a": 1}


def test_trace_logging(caplog):
    logger = logging.getLogger("pathquery.tests")
    caplog.set_level(logging.DEBUG, logger="pathquery.tests")
    config = QueryConfig(trace_enabled=True, logger=logger)
    assert evaluate("a.b", {"a": {"b": 2}}, config=config) == 2
    assert "segment 'b' on mapping -> 2" in caplog.text


def test_metrics_hook():
    calls = []
    config = QueryConfig(metrics_increment=lambda name, n: calls.append(name))
    assert evaluate("a.x", {"a": {}}, config=config) is None
    assert calls == ["query.evaluations", "query.missing"]


def test_custom_adapter_makes_strings_dispatchable():
    registry = AdapterRegistry()
    registry.register(str, lambda s: MethodTable({"upper": s.upper}))
    assert evaluate("name.upper()", {"name": "ada"}, registry=registry) == "ADA"
    assert evaluate("name.upper()", {"name": "ada"}) is None


def test_attribute_error_inside_property_propagates():
    class Broken:
        @property
        def title(self):
            raise AttributeError("internal bug in title")

    with pytest.raises(AttributeError, match="internal bug in title"):
        evaluate("title", Broken())
    assert evaluate("missing", Broken()) is None


def test_getattr_catch_all_may_decline():
    class Picky:
        def __getattr__(self, name):
            if name.startswith("get_"):
                return lambda: name[4:]
            raise AttributeError(name)

    assert evaluate("get_color()", Picky()) == "color"
    assert evaluate("color", Picky()) is None
