"""Tests for DocumentRenderer and JsonRenderer."""

import json

from stackerr.application.construction import merge_errors, new_error, wrap_error
from stackerr.application.renderers.document import (
    DocumentRenderer,
    JsonRenderer,
    render_custom_document,
    render_document,
    render_json,
)
from stackerr.application.renderers.options import (
    FormatOptions,
    JSONFormat,
    default_location_formatter,
)
from tests.factories import here, make_hierarchy, make_link, make_location


def _chain():
    root, loc = new_error("root fail"), here()
    mid = wrap_error(root, "mid", fields={"k": "v"})
    top = wrap_error(mid, "top")
    return top, loc


class TestConcise:
    """render_document() without trace."""

    def test_wrap_chain(self) -> None:
        top, _ = _chain()
        assert render_document(top) == {
            "wrap": [
                {"msg": "top"},
                {"msg": "mid", "fields": {"k": "v"}},
                {"msg": "root fail"},
            ]
        }

    def test_none(self) -> None:
        assert render_document(None) == {}

    def test_foreign(self) -> None:
        assert render_document(ValueError("boom")) == {"external": "boom"}

    def test_join(self) -> None:
        err = merge_errors(new_error("a"), ValueError("b"))
        assert render_document(err) == {"join": [{"wrap": [{"msg": "a"}]}, {"external": "b"}]}

    def test_wrapped_join(self) -> None:
        err = wrap_error(merge_errors(new_error("a"), new_error("b")), "ctx")
        assert render_document(err) == {
            "wrap": [{"msg": "ctx"}],
            "join": [{"wrap": [{"msg": "a"}]}, {"wrap": [{"msg": "b"}]}],
        }


class TestTrace:
    """render_document(include_trace=True)."""

    def test_stack_and_src(self) -> None:
        top, loc = _chain()
        doc = render_document(top, include_trace=True)
        src = default_location_formatter(loc)
        assert doc["stack"][-1] == src
        assert doc["wrap"][-1] == {"msg": "root fail", "src": src}
        assert all("src" in entry for entry in doc["wrap"])

    def test_foreign_type(self) -> None:
        doc = render_document(wrap_error(ValueError("boom"), "ctx"), include_trace=True)
        assert doc["external"] == "boom"
        assert doc["type"] == "builtins.ValueError"

    def test_custom_location_formatter(self) -> None:
        site = make_location(line=9, func="f")
        hierarchy = make_hierarchy(call_frames=(site,), links=(make_link("x", location=site),))
        options = FormatOptions(location_formatter=lambda loc: f"{loc.func}#{loc.line}", include_trace=True)
        doc = DocumentRenderer(JSONFormat.default(options)).render_hierarchy(hierarchy)
        assert doc == {"stack": ["f#9"], "wrap": [{"msg": "x", "src": "f#9"}]}

    def test_render_custom_document(self) -> None:
        top, _ = _chain()
        fmt = JSONFormat(options=FormatOptions(include_trace=True))
        assert render_custom_document(top, fmt) == render_document(top, include_trace=True)


class TestJson:
    """render_json() / JsonRenderer."""

    def test_round_trips_document(self) -> None:
        top, _ = _chain()
        assert json.loads(render_json(top)) == render_document(top)

    def test_opaque_field_values(self) -> None:
        marker = object()
        err = wrap_error(new_error("root"), "ctx", fields={"obj": marker})
        doc = json.loads(render_json(err))
        assert doc["wrap"][0]["fields"]["obj"] == str(marker)

    def test_compact(self) -> None:
        assert JsonRenderer(indent=None).render(ValueError("x")) == '{"external": "x"}'

    def test_none(self) -> None:
        assert render_json(None, indent=None) == "{}"


class UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("no str")


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no str")


class TestUnprintable:
    """Values whose str() raises never abort rendering."""

    def test_external(self) -> None:
        doc = render_document(wrap_error(UnprintableError(), "ctx"), include_trace=True)
        assert doc["external"] == "<UnprintableError str() failed>"
        assert doc["type"].endswith("UnprintableError")

    def test_json_field_value(self) -> None:
        err = wrap_error(new_error("root"), "ctx", fields={"obj": Unprintable()})
        doc = json.loads(render_json(err))
        assert doc["wrap"][0]["fields"]["obj"] == "<Unprintable str() failed>"
