"""Tests for method extraction from declaration bodies."""

from inheritzoom.extractors.java import JavaExtractor
from inheritzoom.extractors.java.members import (
    DOC_SCOPE_FILE,
    build_doc_lookup,
    clean_doc_comment,
    extract_methods,
    find_body_span,
)
from inheritzoom.model import TypeKind


def _names(methods):
    return [m.name for m in methods]


class TestFindBodySpan:
    """Tests for locating a declaration body."""

    def test_span_excludes_braces(self):
        """The span covers the text between the braces."""
        source = "class A { int x; }"
        start, end = find_body_span(source, "A", TypeKind.CLASS)
        assert source[start:end] == " int x; "

    def test_nested_braces(self):
        """Inner blocks do not close the body early."""
        source = "class A { void f() { if (x) { y(); } } } class B {}"
        start, end = find_body_span(source, "A", TypeKind.CLASS)
        assert source[end:] == "} class B {}"

    def test_unbalanced_returns_none(self):
        """A body with no closing brace has no span."""
        assert find_body_span("class A { void f() {", "A", TypeKind.CLASS) is None

    def test_missing_header_returns_none(self):
        """An unknown name has no span."""
        assert find_body_span("class A {}", "B", TypeKind.CLASS) is None

    def test_name_must_match_whole_identifier(self):
        """Looking up A does not find class AB."""
        source = "class AB { } class A { int y; }"
        start, end = find_body_span(source, "A", TypeKind.CLASS)
        assert source[start:end] == " int y; "

    def test_header_inside_doc_comment_is_skipped(self):
        """A mention of the class in its Javadoc is not taken as the header."""
        source = "/** Base class Foo for {@link Bar} users. */\npublic class Foo { int x; }"
        start, end = find_body_span(source, "Foo", TypeKind.CLASS)
        assert source[start:end] == " int x; "

    def test_commented_out_header_is_skipped(self):
        """An old declaration in a line comment does not shadow the real one."""
        source = "// old: class A { }\nclass A { void foo() {} }"
        start, end = find_body_span(source, "A", TypeKind.CLASS)
        assert source[start:end] == " void foo() {} "

    def test_comment_match_running_into_real_header(self):
        """A comment mention whose match spans into the next line is still skipped."""
        source = "// see class A\nclass A { int x; }"
        start, end = find_body_span(source, "A", TypeKind.CLASS)
        assert source[start:end] == " int x; "

    def test_header_inside_string_is_skipped(self):
        """Header text in a string literal is not a declaration."""
        source = 'class B { String s = "class A {"; }\nclass A { int y; }'
        start, end = find_body_span(source, "A", TypeKind.CLASS)
        assert source[start:end] == " int y; "


class TestExtractMethods:
    """Tests for extract_methods()."""

    def test_constructor_is_excluded(self):
        """Only foo survives; A() is a constructor."""
        methods = extract_methods(
            "class A { public A() {} public void foo() {} }", "A", TypeKind.CLASS
        )

        assert _names(methods) == ["foo"]
        assert methods[0].parameters == ""
        assert methods[0].documentation == ""

    def test_parameters_are_kept_verbatim(self):
        """The parameter list is not decomposed."""
        source = "class A { public static <T> List<T> pick(Map<String, T> m, int[] idx) { return null; } }"
        methods = extract_methods(source, "A", TypeKind.CLASS)

        assert _names(methods) == ["pick"]
        assert methods[0].parameters == "Map<String, T> m, int[] idx"

    def test_interface_methods(self):
        """Abstract and default interface methods are both found."""
        source = """
public interface Greeter extends Named {
    String greet(String who);
    default void wave() { System.out.println("hi"); }
}
"""
        methods = extract_methods(source, "Greeter", TypeKind.INTERFACE)
        assert _names(methods) == ["greet", "wave"]

    def test_statements_are_not_methods(self):
        """Calls, control flow and object creation inside bodies are ignored."""
        source = """
class A {
    private final List<String> items = new ArrayList<>();

    void run(int n) throws IOException {
        if (n > 0) {
            process(n);
        } else if (n < 0) {
            throw new IllegalStateException("negative");
        }
        Helper h = new Helper(n);
        return;
    }
}
"""
        assert _names(extract_methods(source, "A", TypeKind.CLASS)) == ["run"]

    def test_commented_out_method_is_ignored(self):
        """Methods inside comments in the body are not reported."""
        source = "class A {\n  // void old() {}\n  /* int older(); */\n  void current() {}\n}"
        assert _names(extract_methods(source, "A", TypeKind.CLASS)) == ["current"]

    def test_doc_comment_is_attached(self):
        """A doc comment directly before the method is cleaned and attached."""
        source = """
class A {
    /**
     * Adds two numbers.
     *
     * @param a first
     */
    @Override
    public int add(int a, int b) { return a + b; }

    public int sub(int a, int b) { return a - b; }
}
"""
        methods = {m.name: m for m in extract_methods(source, "A", TypeKind.CLASS)}

        assert methods["add"].documentation == "Adds two numbers.\n\n@param a first"
        assert methods["sub"].documentation == ""

    def test_doc_does_not_bleed_between_declarations_by_default(self):
        """Docs are looked up inside the declaration body only."""
        source = """
class A {
    /** A's run. */
    void run() {}
}
class B {
    void run() {}
}
"""
        assert extract_methods(source, "B", TypeKind.CLASS)[0].documentation == ""

    def test_file_doc_scope_shares_docs_across_declarations(self):
        """With file scope, same-named methods share a doc comment."""
        source = """
class A {
    /** A's run. */
    void run() {}
}
class B {
    void run() {}
}
"""
        methods = extract_methods(source, "B", TypeKind.CLASS, doc_scope=DOC_SCOPE_FILE)
        assert methods[0].documentation == "A's run."

    def test_unbalanced_body_yields_no_methods(self):
        """Truncated input is tolerated."""
        assert extract_methods("class A { void f() {", "A", TypeKind.CLASS) == []

    def test_missing_declaration_yields_no_methods(self):
        """Asking for an unknown type returns an empty list."""
        assert extract_methods("class A { void f() {} }", "Nope", TypeKind.CLASS) == []

    def test_inner_type_methods_belong_to_outer_body(self):
        """The whole brace-matched body is scanned, inner types included."""
        source = "class Outer { void a() {} class Inner { void b() {} } }"

        assert _names(extract_methods(source, "Outer", TypeKind.CLASS)) == ["a", "b"]
        assert _names(extract_methods(source, "Inner", TypeKind.CLASS)) == ["b"]

    def test_never_raises_on_odd_input(self):
        """Balanced but strange text gives a list."""
        for source in ["", "{}", "class {", "class A {{{}}}", "class A { ((( }"]:
            assert isinstance(extract_methods(source, "A", TypeKind.CLASS), list)

    def test_javadoc_mentioning_the_class_keeps_its_methods(self):
        """A {@link ...} brace in the class Javadoc does not hide the body."""
        source = "/** Base class Foo for {@link Bar} users. */\npublic class Foo { public void run() {} }"
        assert _names(extract_methods(source, "Foo", TypeKind.CLASS)) == ["run"]

    def test_commented_out_declaration_before_real_one(self):
        """The extractor reports the methods of the real declaration."""
        decls = JavaExtractor().extract("// old: class A { }\nclass A { void foo() {} }")
        assert [d.name for d in decls] == ["A"]
        assert _names(decls[0].methods) == ["foo"]


class TestDocHelpers:
    """Tests for doc comment helpers."""

    def test_clean_doc_comment(self):
        """Leading stars and indentation are removed."""
        assert clean_doc_comment("\n * Line one.\n * Line two.\n ") == "Line one.\nLine two."

    def test_first_overload_wins(self):
        """The first documented overload provides the doc for the name."""
        text = "/** one */ void f(int a) {}\n/** two */ void f(String s) {}"
        assert build_doc_lookup(text) == {"f": "one"}
