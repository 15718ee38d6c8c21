from utils.highlight import highlight_matches_html

def _body(html):
    return html[html.index(">") + 1:-len("</div>")]

def test_highlight_basic():
    assert _body(highlight_matches_html("abcdef", [(1, 2), (4, 1)])) == "a<mark>bc</mark>d<mark>e</mark>f"

def test_highlight_escapes_and_clips():
    assert _body(highlight_matches_html("<a>", [(0, 10)])) == "<mark>&lt;a&gt;</mark>"
    assert _body(highlight_matches_html("abcd", [(0, 3), (1, 3)])) == "<mark>abc</mark><mark>d</mark>"
    assert _body(highlight_matches_html("ab", [(5, 1), (0, 0)])) == "ab"

def test_highlight_empty():
    assert highlight_matches_html("", [(0, 1)]) == "<em>No text</em>"
