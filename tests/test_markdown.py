"""Tests for markdown to HTML conversion."""

from business_planner.utils.markdown import markdown_to_html


def test_headings():
    assert markdown_to_html("# Title") == "<h1>Title</h1>"
    assert markdown_to_html("## Section") == "<h2>Section</h2>"
    assert markdown_to_html("### Sub") == "<h3>Sub</h3>"


def test_list_items_and_emphasis():
    html = markdown_to_html("- **Bold** and *italic*")
    assert html == "<li><strong>Bold</strong> and <em>italic</em></li>"


def test_newlines_become_breaks():
    assert markdown_to_html("# Title\n- Item") == "<h1>Title</h1><br><li>Item</li>"


def test_plain_text_unchanged():
    assert markdown_to_html("Just text") == "Just text"
