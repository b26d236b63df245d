"""Unit tests for two-stage attribute templates."""

from pkgexport.export.template import DeferredRef, Template, dedupe


def test_dedupe_keeps_first_occurrence_order():
    assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_dedupe_removes_exact_duplicates_only():
    """Entries differing by case or whitespace are distinct."""
    assert dedupe(["-DFOO", "-dfoo", "-DFOO ", "-DFOO"]) == ["-DFOO", "-dfoo", "-DFOO "]


def test_dedupe_never_sorts():
    assert dedupe(["z", "y", "x"]) == ["z", "y", "x"]


def test_entries_dedupe_literals_and_references():
    template = Template()
    template.add_literals(["-DA", "-DB", "-DA"])
    template.add_deferred("Boost_DEFINITIONS")
    template.add_deferred("Boost_DEFINITIONS")

    assert template.entries() == ["-DA", "-DB", DeferredRef("Boost_DEFINITIONS")]


def test_deferred_ref_renders_as_variable_reference():
    assert str(DeferredRef("ZLIB_LIBRARIES")) == "${ZLIB_LIBRARIES}"


def test_render_resolves_and_dedupes_at_load_time():
    """Values contributed by dependencies are deduplicated against own entries."""
    template = Template()
    template.add_literal("/usr/include/")
    template.add_deferred("Boost_INCLUDE_DIRS")
    template.add_deferred("ZLIB_INCLUDE_DIRS")

    resolved = {
        "Boost_INCLUDE_DIRS": ["/opt/boost/include", "/usr/include/"],
        "ZLIB_INCLUDE_DIRS": ["/opt/boost/include", "/opt/zlib"],
    }

    assert template.render(resolved) == ["/usr/include/", "/opt/boost/include", "/opt/zlib"]


def test_render_unresolved_reference_expands_to_nothing():
    template = Template()
    template.add_deferred("Missing_LIBRARIES")
    template.add_literal("foo")

    assert template.render({}) == ["foo"]


def test_empty_template():
    template = Template()

    assert template.is_empty()
    assert template.entries() == []
