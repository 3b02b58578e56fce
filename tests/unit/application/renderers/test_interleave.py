"""Tests for renderers/_base.py."""

from stackerr.application.renderers._base import EntryKind, interleave, qualified_type_name
from tests.factories import make_hierarchy, make_link, make_location


class TestInterleave:
    """Frames and links merged into one ordered stream."""

    def test_frames_only(self) -> None:
        a, b = make_location(line=1), make_location(line=2)
        entries = list(interleave(make_hierarchy(call_frames=(a, b))))
        assert entries == [(EntryKind.FRAME, a), (EntryKind.FRAME, b)]

    def test_link_after_its_site(self) -> None:
        a, b, c = make_location(line=1), make_location(line=2), make_location(line=3)
        link = make_link("at b", location=b)
        entries = list(interleave(make_hierarchy(call_frames=(a, b, c), links=(link,))))
        assert entries == [
            (EntryKind.FRAME, a),
            (EntryKind.SITE, b),
            (EntryKind.LINK, link),
            (EntryKind.FRAME, c),
        ]

    def test_shared_site_emitted_once(self) -> None:
        a, b, c = make_location(line=1), make_location(line=2), make_location(line=3)
        first = make_link("first", location=b)
        second = make_link("second", location=b)
        third = make_link("third", location=c)
        hierarchy = make_hierarchy(call_frames=(a, b, c), links=(first, second, third))
        kinds = [kind for kind, _ in interleave(hierarchy)]
        assert kinds == [
            EntryKind.FRAME,
            EntryKind.SITE,
            EntryKind.LINK,
            EntryKind.LINK,
            EntryKind.SITE,
            EntryKind.LINK,
        ]

    def test_empty(self) -> None:
        assert list(interleave(make_hierarchy())) == []


class TestQualifiedTypeName:
    """Tests for qualified_type_name()."""

    def test_builtin(self) -> None:
        assert qualified_type_name(ValueError("x")) == "builtins.ValueError"

    def test_nested_class(self) -> None:
        class Local(Exception):
            pass

        name = qualified_type_name(Local())
        assert name.endswith("TestQualifiedTypeName.test_nested_class.<locals>.Local")
