"""Tests for declaration segmentation."""

from scripts.classdump.lines import split_lines
from scripts.classdump.segmenter import (
    DeclarationSegmenter,
    SegmenterState,
    has_declaration_prefix,
    has_end_prefix,
    iter_declarations,
)


class TestMarkers:
    """Tests for start and end marker detection."""

    def test_protocol_and_interface_start(self):
        assert has_declaration_prefix("@protocol Foo <NSObject>")
        assert has_declaration_prefix("@interface Foo : NSObject")
        assert not has_declaration_prefix("@implementation Foo")
        assert not has_declaration_prefix("  @interface Foo : NSObject")

    def test_end_marker(self):
        assert has_end_prefix("@end")
        assert has_end_prefix("@end // trailing")
        assert not has_end_prefix("- (void)end;")


class TestIterDeclarations:
    """Tests for iter_declarations."""

    def test_yields_blocks_in_order(self):
        """N well-formed pairs yield N blocks in source order."""
        lines = [
            "// header",
            "@protocol A <NSObject>",
            "@end",
            "",
            "@interface B : NSObject",
            "- (void)b;",
            "@end",
            "@interface C : NSObject",
            "@end",
        ]
        blocks = list(iter_declarations(lines))
        assert blocks == [
            ["@protocol A <NSObject>", "@end"],
            ["@interface B : NSObject", "- (void)b;", "@end"],
            ["@interface C : NSObject", "@end"],
        ]

    def test_lines_outside_blocks_excluded(self):
        """Lines between declarations belong to no block."""
        lines = ["junk", "@protocol A", "@end", "between", "@protocol B", "@end", "after"]
        flattened = [line for block in iter_declarations(lines) for line in block]
        assert "junk" not in flattened
        assert "between" not in flattened
        assert "after" not in flattened

    def test_unterminated_trailing_declaration_dropped(self):
        """A dangling start yields nothing; earlier blocks still come through."""
        lines = ["@protocol A", "@end", "@interface B : NSObject", "- (void)b;"]
        assert list(iter_declarations(lines)) == [["@protocol A", "@end"]]

    def test_only_unterminated_declaration(self):
        """A stream with only an open declaration yields no blocks."""
        assert list(iter_declarations(["@interface B : NSObject", "- (void)b;"])) == []

    def test_nested_start_marker_absorbed(self):
        """A start marker inside an open block is ordinary content."""
        lines = ["@interface A : NSObject", "@protocol Inner", "@end", "@end"]
        blocks = list(iter_declarations(lines))
        assert blocks == [["@interface A : NSObject", "@protocol Inner", "@end"]]

    def test_stray_end_marker_ignored(self):
        """An end marker outside a declaration starts and ends nothing."""
        lines = ["@end", "@protocol A", "@end"]
        assert list(iter_declarations(lines)) == [["@protocol A", "@end"]]

    def test_empty_stream(self):
        assert list(iter_declarations([])) == []

    def test_lazy(self):
        """Blocks are produced one at a time from a single-pass iterator."""
        source = iter(["@protocol A", "@end", "@protocol B", "@end"])
        blocks = iter_declarations(source)
        assert next(blocks) == ["@protocol A", "@end"]
        assert next(source) == "@protocol B"

    def test_sample_dump(self, sample_dump):
        """A real dump yields its four declarations."""
        blocks = list(iter_declarations(split_lines(sample_dump)))
        assert [block[0] for block in blocks] == [
            "@protocol NSObject",
            "@protocol ExampleDelegate <NSObject>",
            "@interface AppDelegate : NSObject <NSApplicationDelegate>",
            "@interface NSString (ExampleAdditions)",
        ]
        assert all(block[-1] == "@end" for block in blocks)

    def test_custom_markers(self):
        lines = ["BEGIN x", "body", "END", "BEGIN y"]
        assert list(iter_declarations(lines, ["BEGIN"], "END")) == [["BEGIN x", "body", "END"]]


class TestDeclarationSegmenter:
    """Tests for the segmenter's state and discarded declarations."""

    def test_unterminated_recorded(self):
        """The discarded open declaration is kept for reporting."""
        segmenter = DeclarationSegmenter()
        blocks = list(segmenter.segment(["@protocol A", "@end", "@protocol B", "- (void)b;"]))
        assert blocks == [["@protocol A", "@end"]]
        assert segmenter.unterminated == ["@protocol B", "- (void)b;"]
        assert segmenter.state is SegmenterState.OUTSIDE

    def test_no_unterminated_when_all_closed(self):
        segmenter = DeclarationSegmenter()
        list(segmenter.segment(["@protocol A", "@end"]))
        assert segmenter.unterminated is None

    def test_state_reset_after_yield(self):
        """State returns to OUTSIDE as soon as a block is yielded."""
        segmenter = DeclarationSegmenter()
        blocks = segmenter.segment(["@protocol A", "x", "@end", "tail"])
        next(blocks)
        assert segmenter.state is SegmenterState.OUTSIDE

    def test_reuse_resets(self):
        """A second scan starts fresh."""
        segmenter = DeclarationSegmenter()
        list(segmenter.segment(["@protocol A"]))
        assert segmenter.unterminated == ["@protocol A"]
        assert list(segmenter.segment(["@protocol B", "@end"])) == [["@protocol B", "@end"]]
        assert segmenter.unterminated is None
